"""Test configuration."""

import os
from collections.abc import Generator
from pathlib import Path
from typing import List

import pytest
from pytest import Config

from geofield.core.logging import configure_logging

fixture = pytest.fixture


@fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


pytest_plugins: List[str] = [
    "tests.fixtures.geocoding",
]


@fixture(autouse=True)
def isolated_geocode_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep host geocoding settings out of the tests.

    Yields:
        None: Environment without GEOCODE_* overrides
    """
    for key in list(os.environ):
        if key.startswith("GEOCODE_"):
            monkeypatch.delenv(key, raising=False)
    yield


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    # Configure logging for test environment
    configure_logging(testing=True)
    config.addinivalue_line("markers", "integration: mark test as an integration test")
