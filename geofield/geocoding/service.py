"""Geocoding service resolving addresses into GeocodeRecords.

This module ties the engine together:
- Normalizes the address input
- Resolves the HTTP transport and builds the provider chain
- Runs the chain in fallback priority order
- Produces an immutable GeocodeRecord and its derived text views
"""

from collections.abc import Iterable
from typing import Any, Optional, Union

from geofield.core.config import ProviderConfig, Settings, settings as default_settings
from geofield.core.logging import get_logger
from geofield.geocoding.address import coerce_address, normalize
from geofield.geocoding.chain import ProviderChainBuilder, parse_provider_names
from geofield.geocoding.exceptions import NotFoundError
from geofield.geocoding.fallback import FallbackGeocoder
from geofield.geocoding.record import NOT_FOUND_MESSAGE, GeocodeRecord
from geofield.geocoding.registry import ProviderRegistry
from geofield.geocoding.transport import TransportAdapterFactory

logger = get_logger(module="geocode_service")


class GeocodeService:
    """Resolve addresses through a configurable provider fallback chain."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider_config: Optional[ProviderConfig] = None,
        registry: Optional[ProviderRegistry] = None,
        fallback: Optional[FallbackGeocoder] = None,
    ):
        """Initialize the service.

        Args:
            settings: Application settings, defaults to the module settings
            provider_config: Named provider settings, defaults to an
                environment snapshot
            registry: Provider registry, defaults to the built-in table
            fallback: Chain runner
        """
        self.settings = settings or default_settings
        self.provider_config = (
            provider_config if provider_config is not None else ProviderConfig.from_env()
        )
        self.transports = TransportAdapterFactory(
            timeout=self.settings.GEOCODE_TIMEOUT,
            user_agent=f"{self.settings.GEOCODE_USER_AGENT}/{self.settings.version}",
        )
        self.chain_builder = ProviderChainBuilder(self.provider_config, registry)
        self.fallback = fallback or FallbackGeocoder()

    def resolve(
        self,
        address: Any,
        providers: Union[str, Iterable[str], None] = None,
        adapter: Optional[str] = None,
    ) -> GeocodeRecord:
        """Geocode an address into a new record.

        Args:
            address: Free text, a StructuredAddress or a mapping of its parts
            providers: Provider names in priority order; defaults to
                GEOCODE_PROVIDERS
            adapter: Transport name; defaults to GEOCODE_ADAPTER

        Returns:
            Record with either coordinates or the not-found message

        Raises:
            ConfigurationError: If the transport or provider list is invalid
        """
        raw_input = coerce_address(address)
        text = normalize(raw_input)

        if providers is None:
            providers = self.settings.GEOCODE_PROVIDERS
        if adapter is None:
            adapter = self.settings.GEOCODE_ADAPTER

        transport = self.transports.resolve(adapter)
        chain = self.chain_builder.build(parse_provider_names(providers), transport)

        try:
            result = self.fallback.run(chain, text)
        except NotFoundError as e:
            logger.info(
                "address_not_geocoded",
                reason=e.message,
                outcomes=[outcome.status.value for outcome in e.outcomes],
            )
            return GeocodeRecord.not_found(raw_input, text, NOT_FOUND_MESSAGE)

        return GeocodeRecord.found(raw_input, text, result.coordinates, result.provider)

    def processed_text(self, record: GeocodeRecord) -> str:
        """Re-derive the normalized address text from the stored input."""
        return normalize(record.raw_input)

    def search_text(self, record: GeocodeRecord) -> str:
        """Text to index for search; always the same as processed_text."""
        return self.processed_text(record)


# Singleton instance
_geocode_service = None


def get_geocode_service() -> GeocodeService:
    """Get or create the singleton geocode service instance.

    Returns:
        GeocodeService instance
    """
    global _geocode_service
    if _geocode_service is None:
        _geocode_service = GeocodeService()
    return _geocode_service
