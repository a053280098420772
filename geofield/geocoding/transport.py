"""HTTP transport selection shared by every provider of a request."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from geopy.adapters import BaseSyncAdapter, RequestsAdapter, URLLibAdapter

from geofield.core.config import settings
from geofield.core.logging import get_logger
from geofield.geocoding.exceptions import ConfigurationError

logger = get_logger(module="transport")


class TransportAdapterKind(str, Enum):
    """Supported HTTP execution strategies."""

    DEFAULT_HTTP = "default-http"
    SOCKET_HTTP = "socket-http"


ADAPTERS: dict[TransportAdapterKind, type[BaseSyncAdapter]] = {
    TransportAdapterKind.DEFAULT_HTTP: RequestsAdapter,
    TransportAdapterKind.SOCKET_HTTP: URLLibAdapter,
}

# Names used by older host configurations
ALIASES: dict[str, TransportAdapterKind] = {
    "curl": TransportAdapterKind.DEFAULT_HTTP,
    "socket": TransportAdapterKind.SOCKET_HTTP,
}


@dataclass
class Transport:
    """A resolved transport, passed as the first argument to every provider."""

    kind: TransportAdapterKind
    adapter_factory: Callable[..., BaseSyncAdapter]
    timeout: int
    user_agent: str

    def geocoder_options(self) -> dict[str, Any]:
        """Keyword arguments common to every geopy geocoder constructor."""
        return {
            "adapter_factory": self.adapter_factory,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
        }


class TransportAdapterFactory:
    """Resolve transport names into fresh Transport instances."""

    def __init__(self, timeout: int | None = None, user_agent: str | None = None):
        self.timeout = timeout or settings.GEOCODE_TIMEOUT
        self.user_agent = user_agent or f"{settings.GEOCODE_USER_AGENT}/{settings.version}"

    @staticmethod
    def kind_for(name: str | None) -> TransportAdapterKind:
        """Map a transport name to its kind.

        Raises:
            ConfigurationError: If the name is not a known transport
        """
        key = (name or "").strip().lower()
        if not key:
            return TransportAdapterKind.DEFAULT_HTTP
        if key in ALIASES:
            return ALIASES[key]
        try:
            return TransportAdapterKind(key)
        except ValueError:
            raise ConfigurationError("invalid transport adapter") from None

    def resolve(self, name: str | None = None) -> Transport:
        """Build a new Transport for the given name (default-http when empty)."""
        kind = self.kind_for(name)
        logger.debug("transport_resolved", requested=name, kind=kind.value)
        return Transport(
            kind=kind,
            adapter_factory=ADAPTERS[kind],
            timeout=self.timeout,
            user_agent=self.user_agent,
        )
