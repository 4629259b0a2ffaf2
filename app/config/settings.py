"""
Environment configuration for the worker vacation service.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Application configuration
    APP_NAME: str = Field(
        default="Workers Vacation Management API",
        validation_alias=AliasChoices("APP_NAME", "PROJECT_NAME"),
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("APP_VERSION", "PROJECT_VERSION"),
    )
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # CORS
    # str accepted so comma-separated env values reach the validator undecoded
    CORS_ORIGINS: Union[List[str], str] = Field(
        default=["*"],
        validation_alias=AliasChoices("CORS_ORIGINS", "BACKEND_CORS_ORIGINS"),
    )

    # Database configuration
    DATABASE_URL: str = "sqlite:///./vacations.db"
    DATABASE_ECHO: bool = False
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None
    ENABLE_STRUCTURED_LOGGING: bool = True
    LOG_SQL_QUERIES: bool = False

    # Vacation policy
    VACATION_BASE_DAYS: int = Field(default=15, ge=0)
    VACATION_MAX_DAYS: int = Field(default=30, ge=0)
    VACATION_SENIORITY_BONUS_DAYS: int = Field(default=1, ge=0)

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS_ORIGINS from string to list"""
        if isinstance(v, str):
            # Handle JSON string format from .env
            if v.startswith('[') and v.endswith(']'):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator('LOG_FORMAT', mode='before')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = str(v).lower()
        if v not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return v

    @model_validator(mode="after")
    def validate_vacation_policy(self) -> "Settings":
        """Entitlement starts at the base and grows toward the maximum."""
        if self.VACATION_BASE_DAYS > self.VACATION_MAX_DAYS:
            raise ValueError(
                "VACATION_BASE_DAYS must not exceed VACATION_MAX_DAYS "
                f"({self.VACATION_BASE_DAYS} > {self.VACATION_MAX_DAYS})"
            )
        return self

    def get_database_url(self) -> str:
        """Get the SQLAlchemy database URL"""
        return self.DATABASE_URL


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
