"""
Contact Manager API
Main entry point - app wiring and startup
"""
import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

# Core imports
from core.config import settings
from core.database import init_database, close_database
from core.exceptions import ContactError
from core.logging import logger

# Routes
from routes import api_router

# Services
from services.contacts import get_contact_store

SERVICE_NAME = "Contact Manager API"
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown"""
    logger.info(f"Starting {SERVICE_NAME}...")

    if settings.CONTACT_STORE == "mongo":
        await init_database()

    get_contact_store()
    logger.info(f"{SERVICE_NAME} started successfully")

    yield

    logger.info("Shutting down...")
    close_database()
    logger.info("Server shutdown complete")


# Create the main app
app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=lifespan)

# Include routers
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - service info"""
    return {
        "message": "Contact Manager API is running!",
        "service": SERVICE_NAME,
        "version": VERSION,
        "docs": "/docs",
        "contacts": f"{settings.API_PREFIX}/contacts",
        "health": f"{settings.API_PREFIX}/health"
    }


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_credentials=False,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ContactError)
async def contact_error_handler(request: Request, exc: ContactError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return JSONResponse(status_code=400, content={"message": "; ".join(problems) or "Invalid request"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
