# scripts/init_db.py

import argparse
import logging

from itemboard.config import Settings
from itemboard.db.store import ItemStore
from itemboard.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the items table")
    parser.add_argument("--reset", action="store_true", help="drop existing items first")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings.log_level)

    store = ItemStore.from_url(settings.database_url)
    try:
        store.init_schema(reset=args.reset)
    finally:
        store.dispose()
    logger.info("DB schema created at %s", settings.database_url)


if __name__ == "__main__":
    main()
