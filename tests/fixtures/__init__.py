"""Test fixture package for geofield.

Contains fixtures for:
- Provider configuration and transports
- Fake geocoders and registries for chain tests
"""

from .geocoding import (
    FakeGeocoder,
    fake_provider,
    fake_registry,
    provider_config,
    transport,
)

__all__ = [
    "FakeGeocoder",
    "fake_provider",
    "fake_registry",
    "provider_config",
    "transport",
]
