import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    messages = []
    logger.enable("prioheap")
    sink = logger.add(messages.append, level="WARNING")
    yield messages
    logger.remove(sink)
    logger.disable("prioheap")
