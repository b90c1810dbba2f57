"""MongoDB serialization utilities"""
from models.contact import Contact
from .datetime_utils import format_datetime, parse_datetime


def contact_to_doc(contact: Contact) -> dict:
    """Convert a contact to the document shape stored in MongoDB"""
    doc = contact.model_dump()
    doc['created_at'] = format_datetime(doc['created_at'])
    return doc


def doc_to_contact(doc: dict) -> Contact:
    """Build a contact from a stored document, ignoring Mongo's _id"""
    if doc is None:
        return None
    data = {key: value for key, value in doc.items() if key != '_id'}
    data['created_at'] = parse_datetime(data.get('created_at'))
    return Contact(**data)
