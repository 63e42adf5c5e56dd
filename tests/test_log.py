import logging

from resource_id import ResourceId, setup_logging
from resource_id.log import get_logger, log


def test_setup_logging_reads_level_from_environment(monkeypatch, clean_logger):
    monkeypatch.setenv("RESOURCE_ID_LOG_LEVEL", "debug")
    logger = setup_logging()
    assert logger is clean_logger
    assert logger.level == logging.DEBUG


def test_setup_logging_defaults_to_warning(monkeypatch, clean_logger):
    monkeypatch.delenv("RESOURCE_ID_LOG_LEVEL", raising=False)
    assert setup_logging().level == logging.WARNING


def test_setup_logging_installs_one_handler(clean_logger):
    setup_logging("INFO")
    setup_logging("ERROR")
    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.ERROR


def test_log_appends_context(caplog):
    logger = get_logger("test")
    with caplog.at_level(logging.INFO, logger="resource_id"):
        log(logger, "info", "Stored id", table="books", size=8)
    assert "Stored id | table=books size=8" in caplog.text


def test_parse_rejections_are_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="resource_id"):
        try:
            ResourceId.parse("books/BKB3XYT465KZ68")
        except ValueError:
            pass
    assert "kind=checksum_mismatch" in caplog.text
