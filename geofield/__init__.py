"""Address geocoding through an ordered chain of third-party providers."""

__version__ = "0.1.0"
