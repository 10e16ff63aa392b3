"""
Logging configuration.
"""
import logging
import sys
from typing import Optional
from gamerental.core.config import settings


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...). Defaults to
            settings.LOG_LEVEL.

    Returns:
        The configured "gamerental" logger
    """
    logger = logging.getLogger("gamerental")
    
    # If logger is already configured, return it
    if logger.handlers:
        return logger
    
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    return logger
