"""Sequential first-success geocoding over a provider chain."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from geopy.exc import GeopyError

from geofield.core.logging import get_logger
from geofield.geocoding.exceptions import NotFoundError
from geofield.geocoding.providers import ProviderInstance
from geofield.geocoding.record import Coordinates

logger = get_logger(module="fallback_geocoder")


class OutcomeStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class ProviderOutcome:
    """What a single provider returned during a chain run."""

    provider: str
    status: OutcomeStatus
    coordinates: Optional[Coordinates] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ChainResult:
    """A successful chain run."""

    coordinates: Coordinates
    provider: str
    outcomes: tuple[ProviderOutcome, ...] = field(default_factory=tuple)


class FallbackGeocoder:
    """Query providers strictly in order until one returns coordinates.

    Provider failures of any kind count as "no result" for that provider;
    only exhausting the whole chain is reported, as NotFoundError.
    """

    RESULT_LIMIT = 1

    def _query(self, provider: ProviderInstance, text: str) -> ProviderOutcome:
        try:
            candidates = provider.geocode(text, limit=self.RESULT_LIMIT)
        except GeopyError as e:
            logger.warning(
                "provider_failed", provider=provider.name, address=text[:50], error=str(e)
            )
            return ProviderOutcome(provider.name, OutcomeStatus.ERROR, error=str(e))
        except Exception as e:
            logger.error(
                "provider_unexpected_error",
                provider=provider.name,
                address=text[:50],
                error=repr(e),
            )
            return ProviderOutcome(provider.name, OutcomeStatus.ERROR, error=repr(e))

        if not candidates:
            logger.debug("provider_no_result", provider=provider.name, address=text[:50])
            return ProviderOutcome(provider.name, OutcomeStatus.NOT_FOUND)
        return ProviderOutcome(provider.name, OutcomeStatus.FOUND, coordinates=candidates[0])

    def run(self, providers: Sequence[ProviderInstance], text: str) -> ChainResult:
        """Run the chain and report every provider outcome.

        Raises:
            NotFoundError: If no provider returned coordinates
        """
        if not text.strip():
            logger.warning("empty_address")
            raise NotFoundError("empty address")

        outcomes: list[ProviderOutcome] = []
        for provider in providers:
            outcome = self._query(provider, text)
            outcomes.append(outcome)
            if outcome.status is OutcomeStatus.FOUND:
                logger.info(
                    "address_geocoded",
                    provider=provider.name,
                    attempts=len(outcomes),
                )
                return ChainResult(outcome.coordinates, provider.name, tuple(outcomes))

        logger.warning(
            "provider_chain_exhausted",
            address=text[:100],
            providers=[outcome.provider for outcome in outcomes],
        )
        raise NotFoundError(outcomes=outcomes)

    def geocode(self, providers: Sequence[ProviderInstance], text: str) -> Coordinates:
        """Return the coordinates from the first provider that finds the text."""
        return self.run(providers, text).coordinates
