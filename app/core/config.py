"""
Payment System configuration.
Centralised access to all environment variables.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Main application configuration.
    Values are loaded from environment variables or the .env file.
    """

    # Application
    APP_NAME: str = "Payment System"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    API_PREFIX: str = "/api"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Invoice registry
    FIRST_INVOICE_ID: int = 1001
    FIRST_PAYMENT_ID: int = 1001
    SEED_DEFAULT_INVOICE: bool = True
    DEFAULT_CUSTOMER_NAME: str = "Default Customer"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Return a single settings instance.
    The LRU cache avoids re-reading the environment on every call.
    """
    return Settings()


# Global settings instance
settings = get_settings()
