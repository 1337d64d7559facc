"""Pytest configuration and fixtures."""

import io
import logging

import pytest
from PIL import Image

from assertkit.runtime import VARIANT_ENV_VAR


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up assertkit loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("assertkit")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def default_variant(monkeypatch):
    """Tests run on the current runtime variant unless they opt in."""
    monkeypatch.delenv(VARIANT_ENV_VAR, raising=False)


@pytest.fixture(scope="session")
def icon_bytes() -> bytes:
    """A 32x32 single-frame ICO file."""
    image = Image.new("RGBA", (32, 32), (200, 40, 40, 255))
    buffer = io.BytesIO()
    image.save(buffer, format="ICO", sizes=[(32, 32)])
    return buffer.getvalue()
