"""
Pytest configuration and shared fixtures for Cumulocity core client tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from cumulocity.adapters.mock import MockAdapter
from cumulocity.client import CumulocityClient


BASE_URL = "https://example.cumulocity.com"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, removed after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_adapter() -> MockAdapter:
    """In-memory adapter with no canned responses."""
    return MockAdapter()


@pytest.fixture
def client(mock_adapter: MockAdapter) -> CumulocityClient:
    """Client sending every request to ``mock_adapter``."""
    return CumulocityClient(adapter=mock_adapter)


@pytest.fixture
def make_config_yaml(temp_dir: Path):
    """
    Factory fixture writing a configuration file and returning its path.

    Usage::

        def test_something(make_config_yaml):
            path = make_config_yaml(connection={"base_url": "https://x"})
    """
    import yaml

    def _make_config(**sections) -> Path:
        path = temp_dir / "config.yaml"
        path.write_text(yaml.safe_dump(sections))
        return path

    return _make_config
