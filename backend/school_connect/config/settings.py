import os
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load the appropriate environment file
env_file = '.env.local'
load_dotenv(env_file)

DEFAULT_ALLOWED_ORIGINS = "http://localhost:5000,http://localhost:19006,exp://localhost:19000"

class Settings(BaseSettings):
    """Application settings."""
    # App settings
    APP_ENV: str = os.getenv('APP_ENV', 'production')
    PORT: int = int(os.getenv('PORT', 8000))
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    # Session settings
    SESSION_COOKIE_NAME: str = os.getenv('SESSION_COOKIE_NAME', 'school_connect.sid')
    SESSION_MAX_AGE_SECONDS: int = int(os.getenv('SESSION_MAX_AGE_SECONDS', 24 * 60 * 60))  # 24 hours

    # Password hashing cost
    BCRYPT_ROUNDS: int = int(os.getenv('BCRYPT_ROUNDS', 10))

    # CORS
    ALLOWED_ORIGINS: str = os.getenv('ALLOWED_ORIGINS', DEFAULT_ALLOWED_ORIGINS)
    ALLOW_ALL_ORIGINS: bool = os.getenv('ALLOW_ALL_ORIGINS', 'false').lower() == 'true'

    # API settings
    API_TITLE: str = "School Connect API"
    API_DESCRIPTION: str = "Backend API for the School Connect parent/teacher app"
    API_VERSION: str = "1.0.0"
    API_DOCS_URL: str = "/api/docs"
    API_REDOC_URL: str = "/api/redoc"
    API_OPENAPI_URL: str = "/api/openapi.json"

    class Config:
        env_file = env_file
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == 'production'

    def allowed_origins(self) -> List[str]:
        if self.ALLOW_ALL_ORIGINS:
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

settings = Settings()
