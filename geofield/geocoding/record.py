"""Geocode result records."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from geofield.geocoding.address import (
    AddressInput,
    StructuredAddress,
    coerce_address,
    normalize,
)

NOT_FOUND_MESSAGE = "This address could not be geocoded."


class Coordinates(BaseModel):
    """A latitude/longitude pair returned by a provider."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class GeocodeRecord(BaseModel):
    """Outcome of resolving one address.

    Exactly one of ``coordinates`` and ``error_message`` is set. Records are
    immutable; a new resolution produces a new record.
    """

    model_config = ConfigDict(frozen=True)

    raw_input: AddressInput
    normalized_address: str
    coordinates: Optional[Coordinates] = None
    error_message: Optional[str] = None
    provider: Optional[str] = None

    @model_validator(mode="after")
    def check_exclusive_outcome(self) -> "GeocodeRecord":
        """Ensure the record is either geocoded or failed, never both."""
        if (self.coordinates is None) == (self.error_message is None):
            raise ValueError(
                "a geocode record needs exactly one of coordinates or error_message"
            )
        return self

    @property
    def geocoded(self) -> bool:
        return self.coordinates is not None

    @classmethod
    def found(
        cls,
        raw_input: AddressInput,
        normalized_address: str,
        coordinates: Coordinates,
        provider: str | None = None,
    ) -> "GeocodeRecord":
        return cls(
            raw_input=raw_input,
            normalized_address=normalized_address,
            coordinates=coordinates,
            provider=provider,
        )

    @classmethod
    def not_found(
        cls,
        raw_input: AddressInput,
        normalized_address: str,
        message: str = NOT_FOUND_MESSAGE,
    ) -> "GeocodeRecord":
        return cls(
            raw_input=raw_input,
            normalized_address=normalized_address,
            error_message=message,
        )

    def as_dict(self) -> dict[str, Any]:
        """Convert to the stored form.

        `address` holds the normalized text. Failed records carry the error
        text and no coordinates; geocoded records carry an empty error string.
        """
        raw: Any = self.raw_input
        if isinstance(raw, StructuredAddress):
            raw = raw.model_dump()
        data: dict[str, Any] = {
            "raw": raw,
            "address": self.normalized_address,
            "error": self.error_message or "",
        }
        if self.coordinates is not None:
            data["latitude"] = self.coordinates.latitude
            data["longitude"] = self.coordinates.longitude
            data["provider"] = self.provider
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeocodeRecord":
        """Rebuild a record from :meth:`as_dict` output."""
        raw_input = coerce_address(data.get("raw") or "")
        normalized = data.get("address")
        if normalized is None:
            normalized = normalize(raw_input)

        if data.get("latitude") is not None and data.get("longitude") is not None:
            return cls.found(
                raw_input,
                normalized,
                Coordinates(latitude=data["latitude"], longitude=data["longitude"]),
                provider=data.get("provider"),
            )
        return cls.not_found(raw_input, normalized, data.get("error") or NOT_FOUND_MESSAGE)
