"""
Database initialization script.

Creates all tables in the configured database.

Usage:
    python scripts/init_db.py [--drop]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.logging import setup_logging
from app.db.init_db import init_db

logger = logging.getLogger("app.scripts.init_db")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the Mesocycle Tracker tables.")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first (destroys all data)")
    args = parser.parse_args()

    setup_logging()
    try:
        init_db(drop_existing=args.drop)
    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)

    logger.info("Database initialized")
    sys.exit(0)
