import logging

import pytest

from dating_app.app.core.logging_config import PACKAGE_LOGGER
from dating_app.app.main import build_demo_service
from dating_app.app.services.dating_service import DatingService


@pytest.fixture
def service() -> DatingService:
    return DatingService()


@pytest.fixture
def demo_service() -> DatingService:
    """Service holding Alice, Bob and Charlie with their interests."""
    return build_demo_service()


@pytest.fixture
def package_logger():
    """Give the test a bare ``dating_app`` logger and restore it afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
