"""Contacts business logic"""
from .store import ContactStore, MongoContactStore, InMemoryContactStore
from .provider import build_contact_store, get_contact_store, reset_contact_store

__all__ = [
    'ContactStore', 'MongoContactStore', 'InMemoryContactStore',
    'build_contact_store', 'get_contact_store', 'reset_contact_store'
]
