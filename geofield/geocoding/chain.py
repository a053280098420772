"""Build ordered provider chains from configured provider names."""

import re
from collections.abc import Iterable
from typing import Optional, Union

from geofield.core.config import ProviderConfig
from geofield.core.logging import get_logger
from geofield.geocoding.exceptions import ConfigurationError
from geofield.geocoding.providers import ProviderInstance
from geofield.geocoding.registry import ProviderDescriptor, ProviderRegistry, default_registry
from geofield.geocoding.transport import Transport

logger = get_logger(module="provider_chain")

# Used when the configured list names no known provider
DEFAULT_PROVIDERS: tuple[str, ...] = ("google_maps", "openstreetmaps", "map_quest")

_DELIMITERS = re.compile(r"[\s,]+")


def parse_provider_names(value: Union[str, Iterable[str], None]) -> list[str]:
    """Split a host provider list on spaces and/or commas.

    Args:
        value: Delimited string or an iterable of names

    Returns:
        Stripped, non-empty names in the given order (duplicates kept)
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = _DELIMITERS.split(value)
    return [name.strip() for name in value if name and name.strip()]


def unique_names(names: Iterable[str]) -> list[str]:
    """De-duplicate names, keeping the first occurrence of each."""
    seen: set[str] = set()
    unique = []
    for name in names:
        if name not in seen:
            seen.add(name)
            unique.append(name)
    return unique


class ProviderChainBuilder:
    """Instantiate providers in fallback priority order.

    Provider parameters are read from the injected ProviderConfig using
    ``PROVIDERNAME_PARAMNAME`` keys; missing values are passed as ``None``.
    """

    def __init__(
        self,
        config: ProviderConfig,
        registry: Optional[ProviderRegistry] = None,
    ):
        self.config = config
        self.registry = registry or default_registry

    def resolve_arguments(self, descriptor: ProviderDescriptor) -> list[Optional[str]]:
        """Look up each constructor parameter of a provider, in declared order."""
        return [self.config.lookup(descriptor.name, param) for param in descriptor.params]

    def descriptors(self, names: Iterable[str]) -> list[ProviderDescriptor]:
        """Resolve names to descriptors, skipping unknown ones."""
        descriptors = []
        for name in unique_names(parse_provider_names(names)):
            descriptor = self.registry.resolve(name)
            if descriptor is None:
                logger.warning("unknown_provider_skipped", provider=name)
                continue
            descriptors.append(descriptor)
        return descriptors

    def build(self, names: Iterable[str], transport: Transport) -> list[ProviderInstance]:
        """Build the provider chain.

        Args:
            names: Provider names in priority order
            transport: Transport shared by every provider

        Returns:
            Provider instances in de-duplicated caller order

        Raises:
            ConfigurationError: If no provider could be resolved at all
        """
        descriptors = self.descriptors(names)
        if not descriptors:
            logger.info("default_provider_chain", providers=list(DEFAULT_PROVIDERS))
            descriptors = self.descriptors(DEFAULT_PROVIDERS)

        chain = [
            descriptor.instantiate(transport, *self.resolve_arguments(descriptor))
            for descriptor in descriptors
        ]
        if not chain:
            raise ConfigurationError("no valid providers")

        logger.debug(
            "provider_chain_built",
            providers=[provider.name for provider in chain],
            transport=transport.kind.value,
        )
        return chain
