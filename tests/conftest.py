import logging

import pytest

from resource_id import ResourceId
from resource_id.log import LOGGER_NAME

# A known-good id: 8 payload bytes 5cd63efb443167f3, checksum '9'
KNOWN_ID = "books/BKB3XYT465KZ69"
KNOWN_VALUE = "BKB3XYT465KZ6"
KNOWN_HEX = "5cd63efb443167f3"


@pytest.fixture
def book_id():
    """The parsed form of KNOWN_ID."""
    return ResourceId.parse(KNOWN_ID)


@pytest.fixture
def clean_logger():
    """Removes handlers installed by setup_logging() once the test is done."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)
