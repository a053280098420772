"""Application configuration."""

import os
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    app_name: str = "geofield"
    version: str = "0.1.0"

    # Geocoding Settings
    GEOCODE_PROVIDERS: str = Field(
        default="",
        description="Provider names in priority order, space or comma delimited",
    )
    GEOCODE_ADAPTER: str = "default-http"
    GEOCODE_TIMEOUT: int = Field(default=10, gt=0)  # seconds per provider call
    GEOCODE_USER_AGENT: str = "geofield"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize log level names to upper case."""
        return value.strip().upper()


class ProviderConfig(Mapping[str, str]):
    """Read-only named settings used to construct geocoding providers.

    Values are looked up with keys of the form ``PROVIDERNAME_PARAMNAME``,
    e.g. ``GOOGLE_MAPS_REGION``. A missing key yields ``None``; no default
    is ever substituted at this layer.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ProviderConfig":
        """Snapshot the process environment (or the given mapping)."""
        return cls(os.environ if environ is None else environ)

    @staticmethod
    def lookup_key(provider: str, param: str) -> str:
        """Build the settings key for a provider constructor parameter."""
        return f"{provider}_{param}".upper()

    def lookup(self, provider: str, param: str) -> str | None:
        return self._values.get(self.lookup_key(provider, param))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


# Create settings instance
settings = Settings()
