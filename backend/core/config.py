"""Application configuration and environment variables"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment
ROOT_DIR = Path(__file__).parent.parent
load_dotenv(ROOT_DIR / '.env')


def _split_origins(value: str) -> list:
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Settings:
    """Application settings"""

    def __init__(self):
        self.MONGO_URL: str = os.environ.get(
            'MONGO_URL', os.environ.get('MONGODB_URI', 'mongodb://localhost:27017')
        )
        self.DB_NAME: str = os.environ.get('DB_NAME', 'contacts')
        self.CONTACT_STORE: str = os.environ.get('CONTACT_STORE', 'mongo').strip().lower()
        self.API_PREFIX: str = os.environ.get('API_PREFIX', '/api').rstrip('/')
        self.HOST: str = os.environ.get('HOST', '0.0.0.0')
        self.PORT: int = int(os.environ.get('PORT', '5000'))
        self.CORS_ORIGINS: list = _split_origins(os.environ.get('CORS_ORIGINS', '*')) or ['*']
        self.LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()


settings = Settings()
