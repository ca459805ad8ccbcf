import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture rubysugar log messages emitted during a test."""
    messages = []
    logger.enable("rubysugar")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("rubysugar")
