import logging
import os
import sys
from pathlib import Path

LOG_DIR = Path.home() / ".local" / "share" / "calendartm" / "logs"

def setup_logging(level_name: str = None):
    """Set up logging for the calendartm package with environment-based levels."""
    env_level = (level_name or os.getenv('CALENDARTM_LOG_LEVEL', '')).upper()
    is_debug = os.getenv('CALENDARTM_DEBUG', '').lower() in ('1', 'true', 'yes')

    # Regular users only see warnings and errors on the console
    if is_debug:
        level = logging.DEBUG
    elif env_level:
        level = getattr(logging, env_level, logging.WARNING)
    else:
        level = logging.WARNING

    log_format = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    detailed_formatter = logging.Formatter(log_format, date_format)
    console_formatter = logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if is_debug
        else '%(levelname)s: %(message)s'
    )

    logger = logging.getLogger('calendartm')
    logger.setLevel(logging.DEBUG)  # Logger accepts all, handlers filter
    logger.handlers.clear()

    # File handler (always detailed); skipped when the home directory is read-only
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_DIR / "calendartm.log", encoding="utf-8")
    except OSError:
        file_handler = None
    if file_handler is not None:
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger

# Initialize logging when package is imported
setup_logging()

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'calendartm.{name}')
    return logging.getLogger('calendartm')
