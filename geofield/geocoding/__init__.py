"""Geocoding engine.

This package provides:
- Address normalization for provider queries and search indexing
- Transport selection and the provider registry
- Provider chain construction and first-success fallback geocoding
- Immutable geocode records
"""

from geofield.geocoding.address import StructuredAddress, normalize
from geofield.geocoding.chain import (
    DEFAULT_PROVIDERS,
    ProviderChainBuilder,
    parse_provider_names,
)
from geofield.geocoding.exceptions import (
    ConfigurationError,
    GeofieldError,
    NotFoundError,
)
from geofield.geocoding.fallback import (
    ChainResult,
    FallbackGeocoder,
    OutcomeStatus,
    ProviderOutcome,
)
from geofield.geocoding.providers import ProviderInstance
from geofield.geocoding.record import NOT_FOUND_MESSAGE, Coordinates, GeocodeRecord
from geofield.geocoding.registry import ProviderDescriptor, ProviderRegistry
from geofield.geocoding.service import GeocodeService, get_geocode_service
from geofield.geocoding.transport import (
    Transport,
    TransportAdapterFactory,
    TransportAdapterKind,
)

__all__ = [
    "StructuredAddress",
    "normalize",
    "DEFAULT_PROVIDERS",
    "ProviderChainBuilder",
    "parse_provider_names",
    "ConfigurationError",
    "GeofieldError",
    "NotFoundError",
    "ChainResult",
    "FallbackGeocoder",
    "OutcomeStatus",
    "ProviderOutcome",
    "ProviderInstance",
    "NOT_FOUND_MESSAGE",
    "Coordinates",
    "GeocodeRecord",
    "ProviderDescriptor",
    "ProviderRegistry",
    "GeocodeService",
    "get_geocode_service",
    "Transport",
    "TransportAdapterFactory",
    "TransportAdapterKind",
]
