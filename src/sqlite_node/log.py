"""
log.py
------
Logging setup shared by the API process and the Celery worker.
"""
import logging

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level=None):
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)
