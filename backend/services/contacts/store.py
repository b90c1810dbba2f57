"""Contact persistence: the store interface and its MongoDB and in-memory backends"""
import re
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Awaitable, Callable, Dict, List

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from core.exceptions import InfrastructureError, NotFoundError, ValidationError
from core.logging import logger
from models.contact import Contact, ContactCreate, ContactUpdate
from utils.serializers import contact_to_doc, doc_to_contact
from utils.validators import is_blank, validate_contact_fields

EDITABLE_FIELDS = ('name', 'email', 'phone', 'address', 'notes')
SEARCH_FIELDS = ('name', 'email', 'phone')


def new_contact(data: ContactCreate) -> Contact:
    """Validate create input and build a contact with a fresh id and timestamp"""
    fields = data.model_dump()
    result = validate_contact_fields(fields)
    if not result.ok:
        raise ValidationError(result.message)
    return Contact(**{key: fields[key] for key in EDITABLE_FIELDS})


def changed_fields(data: ContactUpdate) -> dict:
    """Fields of a partial update that overwrite stored values.

    Omitted, null and empty values keep whatever is already stored, so a
    field cannot be cleared through an update.
    """
    fields = data.model_dump()
    return {key: fields[key] for key in EDITABLE_FIELDS if not is_blank(fields.get(key))}


class ContactStore(ABC):
    """Capability set every contact backend provides"""

    @abstractmethod
    async def list(self) -> List[Contact]:
        """All contacts, newest first"""

    @abstractmethod
    async def get(self, contact_id: str) -> Contact:
        """One contact, or NotFoundError"""

    @abstractmethod
    async def create(self, data: ContactCreate) -> Contact:
        """Persist a new contact, or ValidationError"""

    @abstractmethod
    async def update(self, contact_id: str, data: ContactUpdate) -> Contact:
        """Apply a partial update, or NotFoundError"""

    @abstractmethod
    async def delete(self, contact_id: str) -> None:
        """Remove a contact permanently, or NotFoundError"""

    @abstractmethod
    async def search(self, query: str) -> List[Contact]:
        """Contacts whose name, email or phone contain query, ignoring case"""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored contacts"""


@contextmanager
def _store_errors(action: str):
    try:
        yield
    except PyMongoError as e:
        logger.error(f"Contact {action} failed: {e}")
        raise InfrastructureError(str(e))


class MongoContactStore(ContactStore):
    """Contacts kept in the `contacts` collection of a MongoDB database"""

    def __init__(self, database_provider: Callable[[], Awaitable]):
        self._database_provider = database_provider

    async def _collection(self):
        database = await self._database_provider()
        return database.contacts

    async def list(self) -> List[Contact]:
        collection = await self._collection()
        with _store_errors("list"):
            docs = await collection.find({}, {"_id": 0}).sort("created_at", -1).to_list(None)
        return [doc_to_contact(doc) for doc in docs]

    async def get(self, contact_id: str) -> Contact:
        collection = await self._collection()
        with _store_errors("lookup"):
            doc = await collection.find_one({"id": contact_id}, {"_id": 0})
        if not doc:
            raise NotFoundError()
        return doc_to_contact(doc)

    async def create(self, data: ContactCreate) -> Contact:
        contact = new_contact(data)
        collection = await self._collection()
        with _store_errors("create"):
            await collection.insert_one(contact_to_doc(contact))
        logger.info(f"Contact created: {contact.id}")
        return contact

    async def update(self, contact_id: str, data: ContactUpdate) -> Contact:
        changes = changed_fields(data)
        collection = await self._collection()
        with _store_errors("update"):
            if changes:
                doc = await collection.find_one_and_update(
                    {"id": contact_id},
                    {"$set": changes},
                    projection={"_id": 0},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                doc = await collection.find_one({"id": contact_id}, {"_id": 0})
        if not doc:
            raise NotFoundError()
        logger.info(f"Contact updated: {contact_id}")
        return doc_to_contact(doc)

    async def delete(self, contact_id: str) -> None:
        collection = await self._collection()
        with _store_errors("delete"):
            result = await collection.delete_one({"id": contact_id})
        if result.deleted_count == 0:
            raise NotFoundError()
        logger.info(f"Contact deleted: {contact_id}")

    async def search(self, query: str) -> List[Contact]:
        pattern = {"$regex": re.escape(query), "$options": "i"}
        collection = await self._collection()
        with _store_errors("search"):
            docs = await collection.find(
                {"$or": [{name: pattern} for name in SEARCH_FIELDS]}, {"_id": 0}
            ).to_list(None)
        return [doc_to_contact(doc) for doc in docs]

    async def count(self) -> int:
        collection = await self._collection()
        with _store_errors("count"):
            return await collection.count_documents({})


class InMemoryContactStore(ContactStore):
    """Process-local contacts, lost on restart"""

    def __init__(self):
        self._contacts: Dict[str, Contact] = {}
        self._order: Dict[str, int] = {}
        self._sequence = 0

    def _lookup(self, contact_id: str) -> Contact:
        contact = self._contacts.get(contact_id)
        if contact is None:
            raise NotFoundError()
        return contact

    async def list(self) -> List[Contact]:
        contacts = sorted(
            self._contacts.values(),
            key=lambda c: (c.created_at, self._order[c.id]),
            reverse=True,
        )
        return [c.model_copy() for c in contacts]

    async def get(self, contact_id: str) -> Contact:
        return self._lookup(contact_id).model_copy()

    async def create(self, data: ContactCreate) -> Contact:
        contact = new_contact(data)
        self._sequence += 1
        self._contacts[contact.id] = contact
        self._order[contact.id] = self._sequence
        logger.info(f"Contact created: {contact.id}")
        return contact.model_copy()

    async def update(self, contact_id: str, data: ContactUpdate) -> Contact:
        contact = self._lookup(contact_id)
        updated = contact.model_copy(update=changed_fields(data))
        self._contacts[contact_id] = updated
        logger.info(f"Contact updated: {contact_id}")
        return updated.model_copy()

    async def delete(self, contact_id: str) -> None:
        self._lookup(contact_id)
        del self._contacts[contact_id]
        del self._order[contact_id]
        logger.info(f"Contact deleted: {contact_id}")

    async def search(self, query: str) -> List[Contact]:
        needle = query.lower()
        return [
            c.model_copy() for c in self._contacts.values()
            if any(needle in (getattr(c, name) or "").lower() for name in SEARCH_FIELDS)
        ]

    async def count(self) -> int:
        return len(self._contacts)
