from decimal import Decimal
from typing import Any
from urllib.parse import quote_plus
from uuid import UUID

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and `.env`.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Marketplace Settlement API"
    PROJECT_DESCRIPTION: str = "Checkout, payment settlement and seller ledger for a multi-seller marketplace"
    VERSION: str = "0.1.0"

    # Runtime
    DEBUG: bool = Field(False, description="Enable debug mode (docs, NullPool)")
    ENVIRONMENT: str = Field("production", description="Deployment environment name")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Log output format: colored, json or plain")
    LOG_FILE: str | None = Field(None, description="Optional log file path")
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN; error tracking is disabled when unset")
    CORS_ORIGINS: str = Field("", description="Allowed CORS origins (comma separated)")

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("marketplace", description="Database name")
    DB_USER: str = Field("postgres", description="Database user")
    DB_PASSWORD: str | None = Field(None, description="Database password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")
    DATABASE_URL: str | None = Field(
        None,
        description="Full async database URL; overrides the DB_* settings when set",
    )
    DB_AUTO_CREATE_TABLES: bool = Field(False, description="Create missing tables on startup (development only)")

    # Connection pool
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # Settlement
    DEFAULT_COMMISSION_RATE: Decimal = Field(
        Decimal("10.00"),
        description="Platform commission percentage for sellers without an explicit rate",
    )
    SETTLEMENT_TIMEOUT_SECONDS: float = Field(10.0, description="Upper bound for one settlement unit of work")
    SETTLEMENT_REFERENCE_PREFIX: str = Field("SIM_TX", description="Prefix of minted settlement references")
    PLATFORM_ADMIN_USER_ID: UUID | None = Field(
        None,
        description="Admin user credited with platform revenue; defaults to the earliest admin profile",
    )
    RECENT_TRANSACTIONS_LIMIT: int = Field(10, description="Transactions listed in the admin revenue view")

    # Checkout
    DEFAULT_SHIPPING_FEE: Decimal = Field(
        Decimal("0.00"), ge=0, decimal_places=2, description="Flat shipping fee stored on new orders"
    )
    FLAT_TAX_AMOUNT: Decimal = Field(
        Decimal("0.00"), ge=0, decimal_places=2, description="Flat tax placeholder stored on new orders"
    )

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        if v > 200:
            raise ValueError("DB_MAX_OVERFLOW should not exceed 200")
        return v

    @field_validator("DEFAULT_COMMISSION_RATE")
    @classmethod
    def validate_commission_rate(cls, v):
        if v < 0 or v > 100:
            raise ValueError("DEFAULT_COMMISSION_RATE must be between 0 and 100")
        return v.quantize(Decimal("0.01"))

    @field_validator("SETTLEMENT_TIMEOUT_SECONDS")
    @classmethod
    def validate_settlement_timeout(cls, v):
        if v <= 0:
            raise ValueError("SETTLEMENT_TIMEOUT_SECONDS must be positive")
        return v

    @computed_field
    @property
    def database_url(self) -> str:
        """Synchronous PostgreSQL URL (used by Alembic)."""
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            password = quote_plus(self.DB_PASSWORD)
            return f"postgresql://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"postgresql://{user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @computed_field
    @property
    def async_database_url(self) -> str:
        """Async URL used by the application engine."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """CORS_ORIGINS split into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @computed_field
    @property
    def is_development(self) -> bool:
        """True for debug or local environments."""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Configuration singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Avoids reading the environment more than once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
