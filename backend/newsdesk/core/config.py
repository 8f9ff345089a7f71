"""
Application configuration using Pydantic Settings
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Newsdesk"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = Field(default="development", description="Environment: development, staging, production")
    DEBUG: bool = Field(default=False, description="Debug mode")

    @field_validator('DEBUG', 'RUN_MIGRATIONS', mode='before')
    @classmethod
    def validate_bool_flags(cls, v):
        """Allow boolean flags to be passed as strings"""
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return bool(v)

    # Security
    SECRET_KEY: str = Field(
        default="change-me-in-production",
        description="Secret key used to sign the session cookie carrying flash notices",
    )

    # CORS
    ALLOWED_HOSTS: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Allowed CORS origins"
    )

    @field_validator('ALLOWED_HOSTS', mode='before')
    @classmethod
    def validate_allowed_hosts(cls, v):
        """Validate ALLOWED_HOSTS field to handle JSON string inputs"""
        if isinstance(v, str):
            try:
                import json
                return json.loads(v)
            except json.JSONDecodeError:
                # If not JSON, treat as comma-separated string
                return [host.strip() for host in v.split(',') if host.strip()]
        return v

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./newsdesk.db",
        description="Async SQLAlchemy database URL (postgresql+asyncpg://... in production)",
    )
    RUN_MIGRATIONS: bool = Field(default=True, description="Apply alembic migrations on startup")

    # News
    NEWS_PAGE_SIZE: int = Field(default=25, ge=1, description="Number of news items per public listing page")
    MOBILE_SUBDOMAIN: str = Field(default="mobile", description="Subdomain that switches HTML rendering to the mobile variant")
    TLD_LENGTH: int = Field(default=1, ge=1, description="Number of host labels forming the top-level domain")

    # Templates
    TEMPLATES_DIR: str = Field(
        default=str(PACKAGE_DIR / "templates"),
        description="Directory holding Jinja2 templates",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_FORMAT: Optional[str] = Field(default=None, description="Custom loguru format string")

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()
