"""Document parser building the day/section/item model for display."""

from .lines import (
    DATE_PREFIX_RE,
    is_child_line,
    is_completed_line,
    is_separator,
    require_text,
    section_label,
)
from .schemas import ParsedDay, ParsedItem, ParsedSection, SectionType
from .tags import strip_markers


def _make_item(line: str) -> ParsedItem:
    return ParsedItem(
        raw_line=line,
        display_text=strip_markers(line),
        is_completed=is_completed_line(line),
    )


def parse_days(content: str) -> list[ParsedDay]:
    """Parse a journal into days, sections and items.

    Best-effort and non-throwing: lines outside any date block are ignored,
    and an indented EVENTS line seen before any top-level event is dropped.
    Blank and separator lines are not kept, so the result is for display
    only; mutators work on the raw lines instead.

    Args:
        content: Full journal text

    Returns:
        One ParsedDay per date header, in document order
    """
    require_text("content", content)

    days: list[ParsedDay] = []
    current_day: ParsedDay | None = None
    current_section: ParsedSection | None = None

    for index, line in enumerate(content.split("\n")):
        trimmed = line.strip()

        # Date header starts a new day
        date_match = DATE_PREFIX_RE.match(trimmed)
        if date_match:
            if current_day is not None:
                if current_section is not None:
                    current_day.sections.append(current_section)
                days.append(current_day)
            current_day = ParsedDay(date=date_match.group(0), start_index=index)
            current_section = None
            continue

        if current_day is None:
            continue

        label = section_label(line)
        if label is not None:
            if current_section is not None:
                current_day.sections.append(current_section)
            title = label.upper()
            current_section = ParsedSection(
                type=SectionType.from_label(title), title=title
            )
            continue

        if current_section is None or not trimmed or is_separator(trimmed):
            continue

        item = _make_item(line)
        if current_section.type == SectionType.EVENTS and is_child_line(line):
            if current_section.items:
                current_section.items[-1].children.append(item)
            continue

        current_section.items.append(item)

    if current_day is not None:
        if current_section is not None:
            current_day.sections.append(current_section)
        days.append(current_day)

    return days


def get_day(content: str, date: str) -> ParsedDay | None:
    """Return the first parsed day with the given date."""
    for day in parse_days(content):
        if day.date == date:
            return day
    return None
