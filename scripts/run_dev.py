"""
Development server launcher.

Loads the .env file and serves the API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--host HOST] [--port PORT]
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

import uvicorn

from app.core.config import settings
from app.core.logging import setup_logging

logger = logging.getLogger("app.scripts.run_dev")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the Mesocycle Tracker API with auto-reload.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    setup_logging()
    logger.info("%s %s on http://%s:%d (docs at /docs, database %s)",
                settings.PROJECT_NAME, settings.VERSION, args.host, args.port,
                settings.DATABASE_URL.split("@")[-1])

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level=settings.LOG_LEVEL.lower())
