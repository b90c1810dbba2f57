from fastapi import APIRouter
from core.config import settings
from .health import router as health_router
from .contacts import router as contacts_router

# Create the main API router
api_router = APIRouter(prefix=settings.API_PREFIX)

# Include all sub-routers
api_router.include_router(health_router, tags=["Health"])
api_router.include_router(contacts_router, tags=["Contacts"])

__all__ = ['api_router']
