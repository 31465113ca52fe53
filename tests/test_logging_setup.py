import logging

from invoice_items.logging_setup import configure_logging


def test_configure_logging_installs_one_handler():
    logger = logging.getLogger("invoice_items")
    saved = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    try:
        configure_logging("debug")
        configure_logging("warning")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        logger.handlers[:] = saved
        logger.setLevel(saved_level)
