"""Replace the items of one section of one day."""

import logfire

from ..config import DEFAULT_SECTIONS
from ..lines import is_blank, require_text, splice_lines, splice_section_block
from ..locator import body_start, find_date_block, find_section_within_block
from ..templates import SEPARATOR


def _new_day_lines(date: str, label: str, new_items: list[str]) -> list[str]:
    """Skeleton for a missing day with ``label`` holding ``new_items``."""
    labels = list(DEFAULT_SECTIONS)
    if label.upper() not in labels:
        labels.insert(0, label)

    out = [date, SEPARATOR]
    for name in labels:
        if name == label or name == label.upper():
            out.append(f"[{label}]")
            out.extend(new_items)
        else:
            out.append(f"[{name}]")
        out.append("")
    # Blank line between this day and whatever follows
    out.append("")
    return out


def update_section_for_date(
    content: str, date: str, section_label: str, new_items: list[str]
) -> str:
    """Replace the body of ``[section_label]`` under ``date`` with ``new_items``.

    A missing day is created at the top of the document; a missing section
    is inserted right after the day's separator line. An existing section
    keeps the single blank line that separated it from the next section.

    Args:
        content: Full journal text
        date: Date token (YYYY-MM-DD)
        section_label: Label without brackets, e.g. "EVENTS"
        new_items: Lines to write into the section

    Returns:
        Updated journal text
    """
    require_text("content", content)
    require_text("date", date)
    require_text("section_label", section_label)
    for item in new_items:
        require_text("new_items[]", item)
    if not date or not section_label:
        return content

    lines = content.split("\n")
    header = f"[{section_label}]"
    block = find_date_block(lines, date)

    if block is None:
        logfire.debug("Creating day for section update", date=date, section=header)
        existing = content.lstrip("\n")
        return "\n".join(_new_day_lines(date, section_label, new_items)) + existing

    section = find_section_within_block(lines, block.start, block.end, header)
    if section is None:
        insert_at = body_start(lines, block.start)
        return "\n".join(
            splice_section_block(lines, insert_at, [header, *new_items, ""])
        )

    old_body = lines[section.header_index + 1 : section.end_index]
    body = list(new_items)
    if old_body and is_blank(old_body[-1]) and not (body and is_blank(body[-1])):
        body.append("")

    start = section.header_index + 1
    return "\n".join(splice_lines(lines, start, section.end_index - start, body))
