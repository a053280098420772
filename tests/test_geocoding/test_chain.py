"""Tests for provider chain construction."""

import pytest

from geofield.core.config import ProviderConfig
from geofield.geocoding.chain import (
    DEFAULT_PROVIDERS,
    ProviderChainBuilder,
    parse_provider_names,
    unique_names,
)
from geofield.geocoding.exceptions import ConfigurationError
from geofield.geocoding.registry import ProviderRegistry, default_registry
from tests.fixtures.geocoding import fake_registry

pytestmark = pytest.mark.filterwarnings("ignore::UserWarning")


class TestParseProviderNames:
    """Host provider list parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("google_maps nominatim", ["google_maps", "nominatim"]),
            ("google_maps,nominatim", ["google_maps", "nominatim"]),
            (" google_maps ,  nominatim\ttomtom ", ["google_maps", "nominatim", "tomtom"]),
            ("", []),
            (None, []),
            (["map_quest", "", "  ", " yandex "], ["map_quest", "yandex"]),
        ],
    )
    def test_parse(self, value, expected):
        assert parse_provider_names(value) == expected

    def test_parse_keeps_duplicates(self):
        assert parse_provider_names("a b a") == ["a", "b", "a"]

    def test_unique_names_keeps_first_occurrence(self):
        assert unique_names(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


class TestProviderChainBuilder:
    """Unit tests for ProviderChainBuilder."""

    def test_deduplicates_and_skips_unknown(self, provider_config, transport):
        builder = ProviderChainBuilder(provider_config)

        chain = builder.build(
            ["map_quest", "google_maps", "map_quest", "unknown_x"], transport
        )

        assert [provider.name for provider in chain] == ["map_quest", "google_maps"]

    def test_preserves_caller_order(self, provider_config, transport):
        builder = ProviderChainBuilder(provider_config)

        chain = builder.build(["tomtom", "nominatim", "bing_maps"], transport)

        assert [provider.name for provider in chain] == ["tomtom", "nominatim", "bing_maps"]

    @pytest.mark.parametrize("names", [[], ["", "  "], ["unknown_x", "openstreetmap"]])
    def test_default_chain(self, provider_config, transport, names):
        builder = ProviderChainBuilder(provider_config)

        chain = builder.build(names, transport)

        assert [provider.name for provider in chain] == list(DEFAULT_PROVIDERS)
        assert list(DEFAULT_PROVIDERS) == ["google_maps", "openstreetmaps", "map_quest"]

    def test_no_valid_providers(self, transport):
        registry = fake_registry({"only_fake": None})
        builder = ProviderChainBuilder(ProviderConfig({}), registry)

        with pytest.raises(ConfigurationError, match="no valid providers"):
            builder.build(["unknown_x"], transport)

    def test_empty_registry(self, transport):
        builder = ProviderChainBuilder(ProviderConfig({}), ProviderRegistry(()))

        with pytest.raises(ConfigurationError):
            builder.build([], transport)

    def test_region_is_read_from_named_setting(self, provider_config):
        builder = ProviderChainBuilder(provider_config)
        descriptor = default_registry.resolve("google_maps")

        # locale, region, use_ssl, api_key
        assert builder.resolve_arguments(descriptor) == ["en", "uk", None, None]

    def test_google_maps_region_reaches_query_options(self, provider_config, transport):
        builder = ProviderChainBuilder(provider_config)

        chain = builder.build(["google_maps"], transport)

        assert chain[0].query_options == {"language": "en", "region": "uk"}

    def test_missing_parameters_are_none(self, transport):
        built = []
        registry = fake_registry(
            {"alpha": None, "beta": None}, params=("api_key", "locale"), built=built
        )
        config = ProviderConfig({"ALPHA_API_KEY": "a-key", "BETA_LOCALE": "fr"})
        builder = ProviderChainBuilder(config, registry)

        builder.build(["beta", "alpha"], transport)

        assert built == [("beta", (None, "fr")), ("alpha", ("a-key", None))]

    def test_lookup_uses_upper_cased_keys(self, transport):
        looked_up = []

        class RecordingConfig(ProviderConfig):
            def lookup(self, provider, param):
                looked_up.append(self.lookup_key(provider, param))
                return super().lookup(provider, param)

        builder = ProviderChainBuilder(RecordingConfig({}))
        builder.build(["google_maps"], transport)

        assert looked_up == [
            "GOOGLE_MAPS_LOCALE",
            "GOOGLE_MAPS_REGION",
            "GOOGLE_MAPS_USE_SSL",
            "GOOGLE_MAPS_API_KEY",
        ]

    def test_rejected_construction_stays_in_chain(self, transport):
        config = ProviderConfig({"GOOGLE_MAPS_BUSINESS_CLIENT_ID": "client"})
        builder = ProviderChainBuilder(config)

        chain = builder.build(["google_maps_business", "nominatim"], transport)

        assert [provider.name for provider in chain] == ["google_maps_business", "nominatim"]
        assert not chain[0].available
        assert chain[1].available

    def test_every_registered_provider_can_be_built(self, transport):
        config = ProviderConfig(
            {
                "GOOGLE_MAPS_API_KEY": "key",
                "GOOGLE_MAPS_BUSINESS_CLIENT_ID": "client",
                "GOOGLE_MAPS_BUSINESS_PRIVATE_KEY": "c2lnbmluZy1rZXk=",
                "BING_MAPS_API_KEY": "key",
                "MAP_QUEST_API_KEY": "key",
                "GEOCODER_US_AUTH_ID": "id",
                "GEOCODER_US_AUTH_TOKEN": "token",
                "YANDEX_API_KEY": "key",
                "BAIDU_API_KEY": "key",
                "TOMTOM_API_KEY": "key",
            }
        )
        builder = ProviderChainBuilder(config)

        chain = builder.build(default_registry.names(), transport)

        assert [provider.name for provider in chain] == default_registry.names()
        unavailable = [provider for provider in chain if not provider.available]
        assert unavailable == []
