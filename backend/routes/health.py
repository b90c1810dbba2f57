"""Health check routes"""
from fastapi import APIRouter, Depends
from core.config import settings
from core.exceptions import ContactError
from services.contacts import ContactStore, get_contact_store

router = APIRouter()


@router.get("/health")
async def health_check(store: ContactStore = Depends(get_contact_store)):
    """Detailed health check"""
    health = {
        "status": "healthy",
        "api": True,
        "store": settings.CONTACT_STORE,
        "database": False,
        "contacts": None
    }

    try:
        health["contacts"] = await store.count()
        health["database"] = True
    except ContactError as e:
        health["status"] = "degraded"
        health["database_error"] = e.message

    return health
