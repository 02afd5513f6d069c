"""Application configuration using Pydantic Settings.

All configuration is loaded from environment variables.
See .env.example for required variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing or invalid.

    Fatal: the service must not start serving without a webhook secret and
    translation credentials.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # ==========================================================================
    # Secrets
    # ==========================================================================
    webhook_shared_secret: SecretStr = Field(
        validation_alias=AliasChoices("webhook_shared_secret", "wildix_shared_secret"),
        description="Shared secret for HMAC-SHA256 webhook signatures",
    )
    groq_api_key: SecretStr = Field(description="Groq API key for translation")

    # ==========================================================================
    # Translation
    # ==========================================================================
    groq_model: str = Field(
        default="llama-3.3-70b-versatile",
        description="Groq chat model used for translation",
    )
    translation_temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Sampling temperature (kept low for stable output)",
    )
    translation_max_tokens: int = Field(
        default=256,
        gt=0,
        description="Maximum tokens in a translated reply",
    )
    translation_timeout_seconds: float = Field(
        default=8.0,
        gt=0,
        description="Upper bound on a single translation call",
    )
    fallback_reply_text: str = Field(
        default="One moment please.",
        description="Spoken reply when an utterance cannot be translated",
    )

    # ==========================================================================
    # Sessions
    # ==========================================================================
    session_idle_timeout_seconds: float = Field(
        default=3600.0,
        ge=0,
        description="Evict call sessions idle this long (0 disables eviction)",
    )
    session_sweep_interval_seconds: float = Field(
        default=60.0,
        gt=0,
        description="How often idle sessions are swept",
    )

    # ==========================================================================
    # Server
    # ==========================================================================
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Listening port")

    # ==========================================================================
    # Application
    # ==========================================================================
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Deployment environment"
    )

    @field_validator("webhook_shared_secret", "groq_api_key")
    @classmethod
    def _reject_blank_secret(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("must not be blank")
        return value

    # ==========================================================================
    # Derived Properties
    # ==========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def webhook_secret_bytes(self) -> bytes:
        """Shared secret as the key bytes used for HMAC."""
        return self.webhook_shared_secret.get_secret_value().encode("utf-8")


def load_settings(**overrides) -> Settings:
    """Build settings, converting validation failures into ConfigurationError.

    Only field names are reported, never values, so secrets stay out of logs.
    """
    try:
        return Settings(**overrides)  # type: ignore[call-arg]  # loads from env
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(fields)}",
            fields=fields,
        ) from None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Use dependency injection in FastAPI:
        settings: Settings = Depends(get_settings)
    """
    return load_settings()
