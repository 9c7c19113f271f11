# scripts/init_db.py

import logging

from testimonials_api.config import configure_logging
from testimonials_api.db.engine import get_engine
from testimonials_api.db.schema import metadata

logger = logging.getLogger(__name__)


def main():
    configure_logging()
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created.")

if __name__ == "__main__":
    main()
