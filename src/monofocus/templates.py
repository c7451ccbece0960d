"""Day-block templates and date helpers."""

import re
from datetime import date as Date

from .config import DEFAULT_SECTIONS, SEPARATOR_WIDTH
from .lines import (
    DATE_PREFIX_RE,
    is_blank,
    is_date_header,
    is_section_header,
    is_separator,
    require_text,
)

SEPARATOR = "=" * SEPARATOR_WIDTH


def build_day_block(
    date: str,
    events: list[str] | None = None,
    doing: list[str] | None = None,
    done: list[str] | None = None,
    notes: list[str] | None = None,
) -> str:
    """Render one day with the four standard sections.

    Sections are separated by exactly one blank line and the block ends
    with a single newline after the last section.

    Args:
        date: Date token (YYYY-MM-DD)
        events: Lines for [EVENTS]
        doing: Lines for [DOING]
        done: Lines for [DONE]
        notes: Lines for [NOTES]

    Returns:
        The rendered day block
    """
    bodies = {
        "EVENTS": events or [],
        "DOING": doing or [],
        "DONE": done or [],
        "NOTES": notes or [],
    }
    parts = [date, SEPARATOR]
    for index, label in enumerate(DEFAULT_SECTIONS):
        parts.append(f"[{label}]")
        parts.extend(line for line in bodies[label] if not is_blank(line))
        if index != len(DEFAULT_SECTIONS) - 1:
            parts.append("")
    return "\n".join(parts) + "\n"


def initial_template(today: Date | None = None) -> str:
    """Empty journal for a brand-new user, dated today."""
    today = today or Date.today()
    return build_day_block(today.isoformat())


def extract_dates_from_content(content: str) -> list[str]:
    """Unique date tokens found at the start of lines, newest first."""
    require_text("content", content)
    dates = set()
    for line in content.split("\n"):
        match = DATE_PREFIX_RE.match(line.strip())
        if match:
            dates.add(match.group(0))
    return sorted(dates, reverse=True)


def content_has_date(content: str, date: str) -> bool:
    """True if some line starts with ``date``."""
    require_text("content", content)
    require_text("date", date)
    if not date:
        return False
    return re.search(rf"^[ \t]*{re.escape(date)}", content, re.MULTILINE) is not None


def is_empty_template(content: str) -> bool:
    """True if the document holds only headers, separators and blank lines."""
    require_text("content", content)
    for line in content.split("\n"):
        if is_blank(line) or is_separator(line):
            continue
        if is_date_header(line) or is_section_header(line):
            continue
        return False
    return True
