#!/usr/bin/env python
"""Script to run the Todo Tracker console client."""
from todo_tracker.client.console import main
from todo_tracker.logging_setup import setup_logging

if __name__ == "__main__":
    setup_logging()
    main()
