"""MongoDB database connection management"""
import asyncio
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from .config import settings
from .exceptions import InfrastructureError
from .logging import logger

# MongoDB connection globals
client = None
db = None
_db_lock = asyncio.Lock()


async def _connect():
    """Open the client and verify the server answers"""
    global client, db
    client = AsyncIOMotorClient(settings.MONGO_URL, serverSelectionTimeoutMS=5000)
    await client.admin.command('ping')
    db = client[settings.DB_NAME]
    logger.info(f"Connected to MongoDB database '{settings.DB_NAME}'")


async def ensure_indexes(database):
    """Create the contact collection indexes"""
    await database.contacts.create_index("id", unique=True)
    await database.contacts.create_index([("created_at", -1)])
    logger.info("Database indexes created/verified")


async def get_database():
    """Get or create database connection with locking"""
    global client, db
    async with _db_lock:
        if db is None:
            try:
                await _connect()
            except PyMongoError as e:
                logger.error(f"MongoDB connection failed: {e}")
                close_database()
                raise InfrastructureError(f"Database unavailable: {e}")
    return db


async def init_database():
    """Initialize database connection at startup"""
    async with _db_lock:
        try:
            await _connect()
            await ensure_indexes(db)
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB not available at startup: {e}")
            logger.warning("API will retry connection on first request")
            close_database()
            return False


def close_database():
    """Close database connection"""
    global client, db
    if client:
        client.close()
        logger.info("Database connection closed")
    client = None
    db = None
