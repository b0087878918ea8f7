"""
Registration intake configuration.
All settings come from environment variables; tui/run.py loads a .env file first.
"""

import logging
import os
from datetime import datetime
from typing import List

# Logging
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Presentation
FORM_TITLE = os.getenv("FORM_TITLE", "Registration")
TIMESTAMP_FORMAT = os.getenv("TIMESTAMP_FORMAT", "%x %X")  # locale date + time
SCROLL_TO_NEW_ROW = os.getenv("SCROLL_TO_NEW_ROW", "true").lower() == "true"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def format_timestamp(moment: datetime) -> str:
    """Render a moment as the display string stored on each record."""
    return moment.strftime(TIMESTAMP_FORMAT)


def get_log_level() -> int:
    """Get the numeric logging level (DEBUG wins over LOG_LEVEL)."""
    if DEBUG:
        return logging.DEBUG
    level = getattr(logging, LOG_LEVEL, None)
    return level if isinstance(level, int) else logging.INFO


def validate_form_config() -> List[str]:
    """Validate form configuration and return any issues."""
    issues = []

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        issues.append(f"Invalid LOG_LEVEL: {LOG_LEVEL}. Must be one of {VALID_LOG_LEVELS}")

    if not TIMESTAMP_FORMAT.strip():
        issues.append("TIMESTAMP_FORMAT must not be empty")
    else:
        try:
            datetime.now().strftime(TIMESTAMP_FORMAT)
        except ValueError as e:
            issues.append(f"Invalid TIMESTAMP_FORMAT: {e}")

    if not FORM_TITLE.strip():
        issues.append("FORM_TITLE must not be empty")

    return issues
