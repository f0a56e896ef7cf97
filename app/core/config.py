from pydantic_settings import BaseSettings
from typing import List, Optional, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_V1_STR: str = "/api/v1"
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Workforce API"
    APP_ENV: str = "development"

    # Database Settings
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "workforce_db"

    # Full connection string; takes precedence over the POSTGRES_* parts
    DATABASE_URL_OVERRIDE: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # JWT Settings
    JWT_ISSUER: str = "workforce-api"
    JWT_AUDIENCE: str = "workforce-clients"
    JWT_SUBJECT: str = "workforce-access-token"
    JWT_SECRET_KEY: str = "change-me-in-production-this-is-a-development-key"
    ALGORITHM: str = "HS256"
    # Five years by default, matching the tokens issued by the previous service
    ACCESS_TOKEN_EXPIRE_DAYS: int = 1825

    # Roles
    ADMIN_ROLE: str = "Admin"
    DEFAULT_ROLE: str = "User"

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    FORCE_HTTPS: bool = False

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    class Config:
        env_file = ".env"
        case_sensitive = True
        frozen = True


settings = Settings()


def get_settings() -> Settings:
    """
    Dependency returning the application settings.

    Components receive settings through this dependency (or as an explicit
    argument) so tests can substitute their own instance with
    app.dependency_overrides[get_settings].
    """
    return settings
