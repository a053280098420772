"""CLI interface for geocoding addresses."""

import argparse
import json
import sys
from typing import Any, Optional

from geofield.core.config import ProviderConfig, settings
from geofield.core.logging import configure_logging, get_logger
from geofield.geocoding.address import StructuredAddress
from geofield.geocoding.exceptions import ConfigurationError
from geofield.geocoding.registry import default_registry
from geofield.geocoding.service import GeocodeService

logger = get_logger(module="cli")

STRUCTURED_FIELDS = tuple(StructuredAddress.model_fields)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geofield",
        description="Geocode an address through an ordered chain of providers",
    )
    parser.add_argument("address", nargs="*", help="Free-text address to geocode")
    for field_name in STRUCTURED_FIELDS:
        parser.add_argument(
            f"--{field_name}", help=f"Structured address part: {field_name}"
        )
    parser.add_argument(
        "--providers",
        "-p",
        help="Provider names in priority order, space or comma delimited "
        "(default: GEOCODE_PROVIDERS)",
    )
    parser.add_argument(
        "--adapter",
        "-a",
        help="HTTP transport: default-http or socket-http (default: GEOCODE_ADAPTER)",
    )
    parser.add_argument(
        "--list-providers",
        action="store_true",
        help="List the supported provider names and their settings, then exit",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def _address_from_args(args: argparse.Namespace) -> Optional[Any]:
    parts = {name: getattr(args, name) for name in STRUCTURED_FIELDS}
    structured = {name: value for name, value in parts.items() if value is not None}
    if structured and args.address:
        return None
    if structured:
        return StructuredAddress(**structured)
    return " ".join(args.address)


def _list_providers() -> None:
    for name in default_registry.names():
        descriptor = default_registry.resolve(name)
        keys = ", ".join(
            ProviderConfig.lookup_key(name, param) for param in descriptor.params
        )
        print(f"{name}: {keys}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the geocoding CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        testing=not settings.JSON_LOGS,
        level="debug" if args.verbose else settings.LOG_LEVEL,
    )

    if args.list_providers:
        _list_providers()
        return 0

    address = _address_from_args(args)
    if address is None:
        parser.error("give either a free-text address or structured parts, not both")
    if address == "":
        parser.error("an address is required")

    try:
        record = GeocodeService().resolve(
            address, providers=args.providers, adapter=args.adapter
        )
    except ConfigurationError as e:
        logger.error("configuration_error", error=str(e))
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(record.as_dict(), indent=2))
    return 0 if record.geocoded else 1


if __name__ == "__main__":
    sys.exit(main())
