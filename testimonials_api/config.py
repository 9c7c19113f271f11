# testimonials_api/config.py
"""
Configuration settings, read from the environment once at import time.
"""

import logging
import os

logger = logging.getLogger(__name__)

_DEV_JWT_SECRET = "dev-secret-change-me"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///db.sqlite")  # file in project root

APP_NAME = os.getenv("APP_NAME", "testimonials-api")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
API_VERSION = os.getenv("API_VERSION", "1")

AUTH_JWT_SECRET = os.getenv("AUTH_JWT_SECRET", _DEV_JWT_SECRET)
AUTH_JWT_ALGORITHM = os.getenv("AUTH_JWT_ALGORITHM", "HS256")
AUTH_JWT_EXPIRES_IN = int(os.getenv("AUTH_JWT_EXPIRES_IN", 900))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", 8000))

if AUTH_JWT_SECRET == _DEV_JWT_SECRET:
    logger.warning("AUTH_JWT_SECRET not set - using development secret")


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
