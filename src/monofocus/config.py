"""Configuration constants for Monofocus."""

import os
from pathlib import Path

# Width of the "====" line written under a date header
SEPARATOR_WIDTH = 40

# Sections written into a freshly created day, in order
DEFAULT_SECTIONS = ["EVENTS", "DOING", "DONE", "NOTES"]

# Order used when a day is rebuilt by the deduplicator.
# Non-standard labels follow in first-seen order.
CANONICAL_SECTION_ORDER = ["EVENTS", "DOING", "BACKLOG", "DONE", "NOTES"]

# Name of the journal file inside the data directory
JOURNAL_FILENAME = "journal.txt"


def get_data_dir() -> Path:
    """Get the data directory path from environment (defaults to ./data)."""
    return Path(os.environ.get("MONOFOCUS_DATA_DIR", "data"))


def get_journal_path() -> Path:
    """Get the path of the journal file inside the data directory."""
    return get_data_dir() / JOURNAL_FILENAME
