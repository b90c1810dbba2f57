"""Contacts routes"""
from fastapi import APIRouter, Depends
from typing import List
from core.exceptions import InfrastructureError, SaveFailedError
from models.contact import Contact, ContactCreate, ContactUpdate
from services.contacts import ContactStore, get_contact_store

router = APIRouter(prefix="/contacts")


@router.get("", response_model=List[Contact])
async def get_contacts(store: ContactStore = Depends(get_contact_store)):
    """Get all contacts, newest first"""
    return await store.list()


@router.get("/search/{query}", response_model=List[Contact])
async def search_contacts(query: str, store: ContactStore = Depends(get_contact_store)):
    """Search contacts by name, email or phone"""
    return await store.search(query)


@router.get("/{contact_id}", response_model=Contact)
async def get_contact(contact_id: str, store: ContactStore = Depends(get_contact_store)):
    """Get a single contact"""
    return await store.get(contact_id)


@router.post("", response_model=Contact, status_code=201)
async def create_contact(data: ContactCreate, store: ContactStore = Depends(get_contact_store)):
    """Create a new contact"""
    try:
        return await store.create(data)
    except InfrastructureError as e:
        raise SaveFailedError(e.message)


@router.put("/{contact_id}", response_model=Contact)
async def update_contact(
    contact_id: str, data: ContactUpdate, store: ContactStore = Depends(get_contact_store)
):
    """Update a contact. Empty fields keep their stored value."""
    try:
        return await store.update(contact_id, data)
    except InfrastructureError as e:
        raise SaveFailedError(e.message)


@router.delete("/{contact_id}")
async def delete_contact(contact_id: str, store: ContactStore = Depends(get_contact_store)):
    """Delete a contact"""
    await store.delete(contact_id)
    return {"message": "Contact deleted"}
