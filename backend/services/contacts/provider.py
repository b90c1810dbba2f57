"""Process-wide contact store selection"""
from core.config import settings
from core.database import get_database
from core.logging import logger
from .store import ContactStore, InMemoryContactStore, MongoContactStore

_store = None


def build_contact_store(kind: str) -> ContactStore:
    """Create the store named by the CONTACT_STORE setting"""
    if kind == "memory":
        return InMemoryContactStore()
    if kind == "mongo":
        return MongoContactStore(get_database)
    raise ValueError(f"Unknown CONTACT_STORE '{kind}', expected 'mongo' or 'memory'")


def get_contact_store() -> ContactStore:
    """FastAPI dependency returning the shared contact store"""
    global _store
    if _store is None:
        _store = build_contact_store(settings.CONTACT_STORE)
        logger.info(f"Using {settings.CONTACT_STORE} contact store")
    return _store


def reset_contact_store():
    """Forget the shared store so the next request builds a new one"""
    global _store
    _store = None
