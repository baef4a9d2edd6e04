"""Shared test fixtures for slashschema tests."""

from collections.abc import Iterator

import pytest

from slashschema.utils import get_logger


@pytest.fixture(autouse=True)
def reset_default_logger() -> Iterator[None]:
    """Rebuild the shared logger per test so environment changes apply."""
    get_logger.cache_clear()
    yield
    get_logger.cache_clear()


@pytest.fixture
def color_payload() -> dict[str, object]:
    return {
        "type": 3,
        "name": "color",
        "description": "pick a color",
        "required": False,
        "choices": [
            {"name": "Red", "value": "red"},
            {"name": "Blue", "value": "blue"},
        ],
    }
