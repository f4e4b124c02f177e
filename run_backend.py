#!/usr/bin/env python
"""Script to run the Todo Tracker API server."""
import logging
import os
from pathlib import Path

import uvicorn

from todo_tracker.config import HOST, PORT
from todo_tracker.logging_setup import setup_logging

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    # Relative sqlite paths resolve against the repo root
    os.chdir(Path(__file__).resolve().parent)

    setup_logging()
    logger.info("Server running on http://localhost:%s", PORT)
    uvicorn.run(
        "todo_tracker.main:app",
        host=HOST,
        port=PORT,
        log_config=None,
    )
