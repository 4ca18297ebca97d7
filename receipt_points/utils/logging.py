# receipt_points/utils/logging.py
import logging
import sys

from ..config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def get_logger(name: str = "receipt_points") -> logging.Logger:
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.setLevel(settings.LOG_LEVEL.upper())
    return log

logger = get_logger()
