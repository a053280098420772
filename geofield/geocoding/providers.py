"""Uniform geocode capability over geopy geocoders."""

from typing import Any, Optional

from geopy.geocoders.base import Geocoder

from geofield.geocoding.record import Coordinates


class ProviderInstance:
    """A ready provider in a fallback chain.

    Wraps a geopy geocoder together with the query options resolved from
    configuration. If the geocoder rejected construction, the error is kept
    and raised when the provider is queried so that the failure only affects
    this provider.
    """

    def __init__(
        self,
        name: str,
        geocoder: Optional[Geocoder] = None,
        query_options: Optional[dict[str, Any]] = None,
        construction_error: Optional[Exception] = None,
    ):
        if geocoder is None and construction_error is None:
            raise ValueError(f"Provider {name} needs a geocoder or a construction error")
        self.name = name
        self.geocoder = geocoder
        self.query_options = dict(query_options or {})
        self.construction_error = construction_error

    @property
    def available(self) -> bool:
        return self.construction_error is None

    def geocode(self, text: str, limit: int = 1) -> list[Coordinates]:
        """Geocode text, returning at most ``limit`` candidates.

        Args:
            text: Normalized address text
            limit: Maximum number of candidates wanted

        Returns:
            Candidate coordinates, empty when the provider has no result

        Raises:
            Exception: Whatever the underlying geocoder raised, or the error
                captured while constructing it
        """
        if self.construction_error is not None:
            raise self.construction_error

        if limit == 1:
            location = self.geocoder.geocode(text, exactly_one=True, **self.query_options)
            locations = [location] if location else []
        else:
            locations = self.geocoder.geocode(text, exactly_one=False, **self.query_options) or []

        return [
            Coordinates(latitude=location.latitude, longitude=location.longitude)
            for location in locations[:limit]
        ]

    def __repr__(self) -> str:
        state = "ready" if self.available else f"unavailable: {self.construction_error}"
        return f"ProviderInstance({self.name!r}, {state})"
