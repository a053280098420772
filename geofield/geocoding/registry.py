"""Registry of supported geocoding providers.

Each provider name maps to a descriptor listing, in constructor order, the
configuration parameters the provider takes after the shared transport, and
an explicit factory building the geopy geocoder from them.

Supported providers:
- google_maps: Google Geocoding API
- google_maps_business: Google Maps Platform premier (client id + signing key)
- bing_maps: Bing Maps Locations API
- openstreetmaps: OpenStreetMap's public Nominatim
- map_quest: MapQuest Geocoding API
- nominatim: a self-hosted or third-party Nominatim server
- geocoder_ca: Nominatim restricted to Canadian results
- geocoder_us: Smarty (LiveAddress) US street address API
- ign_openls: IGN France geocoder
- data_science_toolkit: the Data Science Toolkit Google-compatible endpoint
- yandex: Yandex Geocoder
- baidu: Baidu Maps
- tomtom: TomTom Search API
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from geopy.exc import GeopyError
from geopy.geocoders import (
    Baidu,
    Bing,
    GoogleV3,
    IGNFrance,
    LiveAddress,
    MapQuest,
    Nominatim,
    TomTom,
    Yandex,
)
from geopy.geocoders.base import Geocoder

from geofield.core.logging import get_logger
from geofield.geocoding.providers import ProviderInstance
from geofield.geocoding.transport import Transport

logger = get_logger(module="provider_registry")

# A factory returns the geocoder and the options passed to each geocode() call
ProviderFactory = Callable[..., tuple[Geocoder, dict[str, Any]]]

TRUE_VALUES = {"1", "true", "yes", "on"}

DSTK_DOMAIN = "www.datasciencetoolkit.org"
# The toolkit ignores the key, GoogleV3 refuses to build without one
DSTK_API_KEY = "dstk"


@dataclass(frozen=True)
class ProviderDescriptor:
    """Construction requirements of one named provider."""

    name: str
    params: tuple[str, ...]
    factory: ProviderFactory

    def instantiate(self, transport: Transport, *args: Optional[str]) -> ProviderInstance:
        """Build the provider from the transport and its parameters.

        Construction failures are captured on the returned instance.
        """
        if len(args) != len(self.params):
            raise TypeError(
                f"{self.name} takes {len(self.params)} parameters, got {len(args)}"
            )
        try:
            geocoder, options = self.factory(transport, *args)
        except (GeopyError, ValueError) as e:
            logger.warning("provider_construction_failed", provider=self.name, error=str(e))
            return ProviderInstance(self.name, construction_error=e)
        return ProviderInstance(self.name, geocoder=geocoder, query_options=options)


def _options(**options: Any) -> dict[str, Any]:
    """Drop unset query options so provider defaults apply."""
    return {key: value for key, value in options.items() if value is not None}


def _scheme(use_ssl: Optional[str]) -> Optional[str]:
    if use_ssl is None:
        return None
    return "https" if use_ssl.strip().lower() in TRUE_VALUES else "http"


def _user_agent(transport: Transport, user_agent: Optional[str]) -> dict[str, Any]:
    options = transport.geocoder_options()
    if user_agent:
        options["user_agent"] = user_agent
    return options


def google_maps(transport, locale, region, use_ssl, api_key):
    geocoder = GoogleV3(
        api_key=api_key, scheme=_scheme(use_ssl), **transport.geocoder_options()
    )
    return geocoder, _options(language=locale, region=region)


def google_maps_business(transport, client_id, private_key, locale, region, use_ssl, channel):
    geocoder = GoogleV3(
        client_id=client_id,
        secret_key=private_key,
        channel=channel or "",
        scheme=_scheme(use_ssl),
        **transport.geocoder_options(),
    )
    return geocoder, _options(language=locale, region=region)


def bing_maps(transport, api_key, locale):
    geocoder = Bing(api_key=api_key, **transport.geocoder_options())
    return geocoder, _options(culture=locale)


def openstreetmaps(transport, locale, user_agent):
    geocoder = Nominatim(**_user_agent(transport, user_agent))
    return geocoder, _options(language=locale)


def map_quest(transport, api_key):
    geocoder = MapQuest(api_key=api_key, **transport.geocoder_options())
    return geocoder, {}


def nominatim(transport, domain, locale, user_agent):
    options = _user_agent(transport, user_agent)
    if domain:
        options["domain"] = domain
    geocoder = Nominatim(**options)
    return geocoder, _options(language=locale)


def geocoder_ca(transport, locale, user_agent):
    geocoder = Nominatim(**_user_agent(transport, user_agent))
    return geocoder, _options(language=locale, country_codes="ca")


def geocoder_us(transport, auth_id, auth_token):
    geocoder = LiveAddress(
        auth_id=auth_id, auth_token=auth_token, **transport.geocoder_options()
    )
    return geocoder, {}


def ign_openls(transport, api_key, username, password, referer):
    geocoder = IGNFrance(
        api_key=api_key,
        username=username,
        password=password,
        referer=referer,
        **transport.geocoder_options(),
    )
    return geocoder, {}


def data_science_toolkit(transport, domain, api_key):
    geocoder = GoogleV3(
        api_key=api_key or DSTK_API_KEY,
        domain=domain or DSTK_DOMAIN,
        scheme="http",
        **transport.geocoder_options(),
    )
    return geocoder, {}


def yandex(transport, api_key, locale):
    geocoder = Yandex(api_key=api_key, **transport.geocoder_options())
    return geocoder, _options(lang=locale)


def baidu(transport, api_key, security_key):
    geocoder = Baidu(
        api_key=api_key, security_key=security_key, **transport.geocoder_options()
    )
    return geocoder, {}


def tomtom(transport, api_key, locale):
    geocoder = TomTom(api_key=api_key, **transport.geocoder_options())
    return geocoder, _options(language=locale)


PROVIDERS: tuple[ProviderDescriptor, ...] = (
    ProviderDescriptor("google_maps", ("locale", "region", "use_ssl", "api_key"), google_maps),
    ProviderDescriptor(
        "google_maps_business",
        ("client_id", "private_key", "locale", "region", "use_ssl", "channel"),
        google_maps_business,
    ),
    ProviderDescriptor("bing_maps", ("api_key", "locale"), bing_maps),
    ProviderDescriptor("openstreetmaps", ("locale", "user_agent"), openstreetmaps),
    ProviderDescriptor("map_quest", ("api_key",), map_quest),
    ProviderDescriptor("nominatim", ("domain", "locale", "user_agent"), nominatim),
    ProviderDescriptor("geocoder_ca", ("locale", "user_agent"), geocoder_ca),
    ProviderDescriptor("geocoder_us", ("auth_id", "auth_token"), geocoder_us),
    ProviderDescriptor(
        "ign_openls", ("api_key", "username", "password", "referer"), ign_openls
    ),
    ProviderDescriptor(
        "data_science_toolkit", ("domain", "api_key"), data_science_toolkit
    ),
    ProviderDescriptor("yandex", ("api_key", "locale"), yandex),
    ProviderDescriptor("baidu", ("api_key", "security_key"), baidu),
    ProviderDescriptor("tomtom", ("api_key", "locale"), tomtom),
)


class ProviderRegistry:
    """Read-only lookup of provider descriptors by name."""

    def __init__(self, descriptors: tuple[ProviderDescriptor, ...] = PROVIDERS):
        self._descriptors = {descriptor.name: descriptor for descriptor in descriptors}

    def resolve(self, name: str) -> Optional[ProviderDescriptor]:
        return self._descriptors.get(name)

    def names(self) -> list[str]:
        return list(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors


default_registry = ProviderRegistry()
