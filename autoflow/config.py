"""Application configuration using pydantic-settings.

All configuration is loaded from environment variables with sensible defaults.
Secrets should NEVER be logged or exposed in error messages.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Secrets are wrapped in SecretStr to prevent accidental exposure.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("node_env", "environment"),
        description="Deployment environment (development, staging, production)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # JWT Authentication
    jwt_secret: SecretStr = Field(
        default=SecretStr("autoflow-secret-key-change-in-production"),
        description="Secret key for JWT token signing",
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_access_token_expire_minutes: int = Field(default=24 * 60, ge=1, le=10080)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # CORS
    public_url: str = Field(
        default="*",
        description="Comma-separated list of allowed origins",
    )

    # Storage backends (reserved, records are held in memory)
    database_url: str | None = Field(default=None)
    redis_url: str | None = Field(default=None)

    # Rate limiting (slowapi format)
    rate_limit: str = Field(default="100 per 15 minutes")
    rate_limit_enabled: bool = Field(default=True)

    # Execution
    execution_completion_delay: float = Field(
        default=2.0,
        ge=0.0,
        le=3600.0,
        description="Seconds before a simulated execution is marked completed",
    )

    # Default admin account created on startup
    seed_default_admin: bool = Field(default=True)
    default_admin_email: str = Field(default="admin@autoflow.com")
    default_admin_password: SecretStr = Field(default=SecretStr("admin123"))
    default_admin_name: str = Field(default="AutoFlow Admin")

    @field_validator("public_url")
    @classmethod
    def validate_public_url(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [o.strip() for o in v.split(",") if o.strip()]
        if not origins:
            raise ValueError("At least one CORS origin must be specified")
        return v

    @property
    def debug(self) -> bool:
        """Development mode exposes docs and error details."""
        return self.environment == "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [o.strip() for o in self.public_url.split(",") if o.strip()]

    def get_masked_key(self, key_name: str) -> str:
        """Get a masked version of a secret key for logging.

        Only shows first 10 characters followed by '...'
        """
        secret = getattr(self, key_name, None)
        if secret is None:
            return "<not set>"
        if isinstance(secret, SecretStr):
            value = secret.get_secret_value()
        else:
            value = str(secret)
        if len(value) <= 10:
            return "***"
        return f"{value[:10]}..."


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifetime.
    """
    return Settings()


settings = get_settings()
