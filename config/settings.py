from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Tuple
from pathlib import Path


# Keys the API process cannot start without
STARTUP_REQUIRED_KEYS = ("supabase_url", "supabase_anon_key")


class ConfigurationError(RuntimeError):
    """Raised when a required configuration value is missing or unusable"""


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"

    # Billing
    platform_fee_percentage: int = Field(default=5, ge=0, le=100)

    # HTTP API
    site_url: str = ""
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Environment
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator('supabase_url', 'site_url', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v):
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "INFO"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )

    def require(self, *keys: str) -> Tuple[str, ...]:
        """
        Return the values of the given keys, failing on the first empty one.
        The error names the environment variable, e.g. SUPABASE_URL.
        """
        values = []
        for key in keys:
            value = getattr(self, key, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ConfigurationError(f"Missing required environment variable: {key.upper()}")
            values.append(value)
        return tuple(values)

    def validate_startup(self) -> "Settings":
        """Check everything the API process needs, once, before serving."""
        self.require(*STARTUP_REQUIRED_KEYS)
        return self


# Create settings instance
settings = Settings()
