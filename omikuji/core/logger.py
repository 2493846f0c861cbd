# omikuji/core/logger.py

import logging
from logging.handlers import RotatingFileHandler
from .config import settings

logger = logging.getLogger("api_logger")
logger.setLevel(settings.LOG_LEVEL)

if settings.LOG_FILE:
    handler = RotatingFileHandler(settings.LOG_FILE, maxBytes=5*1024*1024, backupCount=5, encoding="utf-8")
else:
    handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
