# app/core/config.py

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (where .env should be located)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"
    )

    # App Configuration
    APP_NAME: str = "Fina API"
    DEBUG: bool = False
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    API_V1_PREFIX: str = "/api/v1"

    # Database Configuration
    DATABASE_URL: str

    # CORS Configuration
    FRONTEND_URL: str = "http://localhost:5028"
    BACKEND_URL: str = "http://localhost:5164"

    # There is no authentication yet, every request is made on behalf of this user
    DEFAULT_USER_ID: str = "test@fina.io"

    # Optional: Environment
    ENVIRONMENT: str = "development"

    @property
    def is_sqlite(self) -> bool:
        """SQLite engines reject the connection pool options used for Postgres"""
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def cors_origins(self) -> list[str]:
        return [url for url in (self.FRONTEND_URL, self.BACKEND_URL) if url]

# Create a global settings instance
settings = Settings()
