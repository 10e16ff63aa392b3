"""
Tests for logging setup.
"""
import logging
from gamerental.core.logging_utils import setup_logging


def test_setup_logging_is_idempotent():
    """Test handlers are attached once and service loggers propagate to it."""
    logger = logging.getLogger("gamerental")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    
    configured = setup_logging("debug")
    again = setup_logging("info")
    
    assert configured is again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logging.getLogger("gamerental.services.order_service").getEffectiveLevel() == logging.DEBUG
    
    logger.removeHandler(logger.handlers[0])
    logger.setLevel(logging.NOTSET)
