from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

from app.core.env_config import env_manager, REQUIRED_VARS


class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int

    ENVIRONMENT: str = "development"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    UPLOAD_DIR: str = "uploads"
    LOG_DIR: str = "logs"

    # General per-client budget; login is limited separately
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_WINDOW_MS: int = 15 * 60 * 1000
    RATE_LIMIT_MAX: int = 100

    # Bootstrap account, created on startup only while the users table is empty
    FIRST_ADMIN_USERNAME: Optional[str] = None
    FIRST_ADMIN_EMAIL: Optional[str] = None
    FIRST_ADMIN_PASSWORD: Optional[str] = None

    class Config:
        case_sensitive = True

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def bootstrap_admin_configured(self) -> bool:
        return bool(self.FIRST_ADMIN_USERNAME and self.FIRST_ADMIN_EMAIL and self.FIRST_ADMIN_PASSWORD)

    def get_environment_config(self) -> dict:
        """Get environment-specific configuration safe for logging (no secrets)"""
        return {
            "environment": self.ENVIRONMENT,
            "cors_origins": self.CORS_ORIGINS,
            "token_expire_minutes": self.ACCESS_TOKEN_EXPIRE_MINUTES,
            "loaded_config_files": env_manager.get_loaded_files(),
        }


@lru_cache()
def get_settings() -> Settings:
    """Build the settings once per process; missing required values abort startup."""
    env_manager.validate_required_vars(REQUIRED_VARS)
    return Settings()
