import logging
from logging.handlers import RotatingFileHandler

from env import LOG_FILE, LOG_LEVEL, CONSOLE_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(pathname)s:%(lineno)d"

logger = logging.getLogger("health_scan")


def setup_logging():
    """Attach the rotating file and console handlers once per process."""
    if logger.handlers:
        return logger

    logger.setLevel(LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    # file gets everything down to LOG_LEVEL, opened on first record
    file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5*1024*1024, backupCount=3, delay=True)
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(CONSOLE_LOG_LEVEL)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


setup_logging()

# stacklevel=2 so pathname:lineno names the caller, not this module
def log_debug(message: str):
    logger.debug(message, stacklevel=2)

def log_info(message: str):
    logger.info(message, stacklevel=2)

def log_warning(message: str):
    logger.warning(message, stacklevel=2)

def log_error(message: str, exc: Exception = None):
    logger.error(message, exc_info=exc, stacklevel=2)

def log_critical(message: str):
    logger.critical(message, stacklevel=2)
