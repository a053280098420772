"""Address input types and normalization.

The normalized form of an address is used both as the query sent to the
geocoding providers and as the text indexed for search, so both call sites
must go through :func:`normalize`.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

STRUCTURED_SEPARATOR = "\n"

# Unicode spaces (NBSP, \x1c-\x1f) are ordinary characters in an address
ASCII_WHITESPACE = " \t\n\r\f\v"
WHITESPACE_RUN = re.compile(r"[ \t\n\r\f\v]+")


class StructuredAddress(BaseModel):
    """Postal address split into the fixed set of named parts."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    addr1: Optional[str] = None
    addr2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None

    def parts(self) -> list[str]:
        """Return the trimmed, non-empty parts in declared field order."""
        parts = []
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            if value is None:
                continue
            value = value.strip(ASCII_WHITESPACE)
            if value:
                parts.append(value)
        return parts


AddressInput = Union[str, StructuredAddress]


def coerce_address(value: Any) -> AddressInput:
    """Turn a string, mapping or StructuredAddress into an AddressInput.

    Raises:
        TypeError: If the value cannot represent an address
    """
    if isinstance(value, (str, StructuredAddress)):
        return value
    if isinstance(value, Mapping):
        return StructuredAddress.model_validate(dict(value))
    raise TypeError(f"Unsupported address input: {type(value).__name__}")


def normalize_text(text: str) -> str:
    """Collapse ASCII whitespace runs (newlines and vertical tabs included)."""
    return WHITESPACE_RUN.sub(" ", text).strip(ASCII_WHITESPACE)


def normalize(address: Any) -> str:
    """Return the canonical single-string form of an address.

    Free text has every ASCII whitespace run collapsed to one space and is trimmed.
    Structured input keeps its non-empty parts, in declared field order,
    joined by newlines.

    Args:
        address: Free text, a StructuredAddress or a mapping of its fields

    Returns:
        Normalized address text, possibly empty
    """
    address = coerce_address(address)
    if isinstance(address, StructuredAddress):
        return STRUCTURED_SEPARATOR.join(address.parts())
    return normalize_text(address)
