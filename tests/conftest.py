import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # CLI commands install file sinks; drop them between tests
    logger.remove()
