"""Errors raised by the geocoding engine."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geofield.geocoding.fallback import ProviderOutcome


class GeofieldError(Exception):
    """Base class for geofield errors."""


class ConfigurationError(GeofieldError):
    """Raised when the transport or provider configuration is unusable.

    This is always raised before any provider is queried.
    """


class NotFoundError(GeofieldError):
    """Raised when every provider in a chain failed to geocode an address."""

    def __init__(
        self,
        message: str = "no provider could geocode the address",
        outcomes: Sequence["ProviderOutcome"] = (),
    ) -> None:
        self.message = message
        self.outcomes = tuple(outcomes)
        super().__init__(message)
