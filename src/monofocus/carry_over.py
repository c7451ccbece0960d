"""Carry unfinished DOING items forward into a new day."""

import logfire

from .lines import is_completed_line, require_text
from .locator import get_section_lines
from .templates import build_day_block, content_has_date, extract_dates_from_content


def get_carry_over_doing_items(content: str, target_date: str) -> list[str]:
    """Unfinished DOING lines from the most recent day before ``target_date``.

    Dates compare as strings, which works because YYYY-MM-DD is fixed width.
    Lines are returned trimmed, in order, with bullets and tags intact;
    lines starting with ``x `` are skipped.
    """
    require_text("content", content)
    require_text("target_date", target_date)
    if not content or not target_date:
        return []

    previous = next(
        (d for d in extract_dates_from_content(content) if d < target_date), None
    )
    if previous is None:
        return []

    doing = get_section_lines(content, previous, "[DOING]")
    return [line for line in doing if not is_completed_line(line)]


def seed_day_with_carry_over(content: str, date: str) -> str:
    """Append a fresh day for ``date`` with carried-over DOING items.

    Returns ``content`` unchanged when the day already exists.
    """
    require_text("content", content)
    require_text("date", date)
    if not date or content_has_date(content, date):
        return content

    carried = get_carry_over_doing_items(content, date)
    logfire.info("Creating day", date=date, carried=len(carried))

    block = build_day_block(date, doing=carried)
    existing = content.rstrip("\n")
    if not existing:
        return block
    return f"{existing}\n\n{block}"
