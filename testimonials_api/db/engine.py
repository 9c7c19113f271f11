# testimonials_api/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from testimonials_api.config import DATABASE_URL


@lru_cache(maxsize=None)
def get_engine() -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(DATABASE_URL, future=True)
