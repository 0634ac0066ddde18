#!/usr/bin/env python3
"""Create the bookings table. Table name, region and endpoint come from the app config (.env)."""

import logging
import sys
from pathlib import Path

from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv

_repo_root = Path(__file__).resolve().parent.parent
load_dotenv(_repo_root / ".env")
load_dotenv(_repo_root / ".env.local")

from appointment_scheduler import config, store

logger = logging.getLogger("create_table")


def main() -> int:
    logging.basicConfig(level=config.log_level(), format=config.LOG_FORMAT)
    try:
        created = store.create_table()
    except (ClientError, BotoCoreError) as e:
        logger.error("Could not create %s: %s", config.table_name(), e)
        return 1
    if created:
        logger.info("Created table %s", config.table_name())
    return 0


if __name__ == "__main__":
    sys.exit(main())
