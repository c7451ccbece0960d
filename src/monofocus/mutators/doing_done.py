"""Moving DOING items to DONE, keeping event subtasks in sync."""

import logfire

from ..lines import (
    is_child_line,
    is_separator,
    leading_whitespace,
    require_text,
    splice_lines,
    splice_section_block,
)
from ..locator import body_start, find_date_block, find_section_within_block
from ..tags import base_text_of, lines_match, normalize_for_match, strip_markers


def get_doing_items_for_date(content: str, date: str) -> list[str]:
    """Raw ``- `` and ``x `` lines of the DOING section for ``date``."""
    require_text("content", content)
    require_text("date", date)
    if not content or not date:
        return []

    lines = content.split("\n")
    block = find_date_block(lines, date)
    if block is None:
        return []
    doing = find_section_within_block(lines, block.start, block.end, "[DOING]")
    if doing is None:
        return []

    out = []
    for raw in lines[doing.header_index + 1 : doing.end_index]:
        trimmed = raw.strip()
        if not trimmed or is_separator(trimmed):
            continue
        if trimmed.startswith("- ") or trimmed.startswith("x "):
            out.append(raw)
    return out


def _complete_matching_subtask(
    lines: list[str], start: int, end: int, match_text: str
) -> list[str]:
    """Mark the first EVENTS child whose text matches ``match_text`` as done."""
    events = find_section_within_block(lines, start, end, "[EVENTS]")
    if events is None or not match_text:
        return lines

    match_norm = normalize_for_match(match_text)
    for i in range(events.header_index + 1, events.end_index):
        line = lines[i]
        if not is_child_line(line):
            continue
        child_clean = strip_markers(line)
        if child_clean and normalize_for_match(child_clean) == match_norm:
            updated = f"{leading_whitespace(line)}x {child_clean}"
            return splice_lines(lines, i, 1, [updated])
    return lines


def move_doing_to_done(content: str, date: str, doing_raw_line: str) -> str:
    """Move one DOING line into DONE as ``x <text>``.

    The line is matched by exact, trimmed or normalized text. DONE is
    created after DOING when missing. If an event subtask carries the same
    text (ignoring trailing tags), it is marked done as well.

    Args:
        content: Full journal text
        date: Date token (YYYY-MM-DD)
        doing_raw_line: Line as shown to the user

    Returns:
        Updated journal text, or ``content`` unchanged if nothing matched
    """
    require_text("content", content)
    require_text("date", date)
    require_text("doing_raw_line", doing_raw_line)
    if not content or not date or not doing_raw_line:
        return content

    lines = content.split("\n")
    block = find_date_block(lines, date)
    if block is None:
        return content
    doing = find_section_within_block(lines, block.start, block.end, "[DOING]")
    if doing is None:
        return content

    match_index = None
    for i in range(doing.header_index + 1, doing.end_index):
        if lines[i] and lines_match(lines[i], doing_raw_line):
            match_index = i
            break
    if match_index is None:
        logfire.debug("DOING line not found", date=date, line=doing_raw_line)
        return content

    removed = lines[match_index]
    lines = splice_lines(lines, match_index, 1)
    block_end = block.end - 1

    cleaned = strip_markers(removed)
    if not cleaned:
        return "\n".join(lines)

    lines = _complete_matching_subtask(
        lines, block.start, block_end, base_text_of(cleaned)
    )

    done_line = f"x {cleaned}"
    done = find_section_within_block(lines, block.start, block_end, "[DONE]")
    if done is not None:
        return "\n".join(splice_lines(lines, done.header_index + 1, 0, [done_line]))

    doing_after = find_section_within_block(lines, block.start, block_end, "[DOING]")
    insert_at = doing_after.end_index if doing_after else body_start(lines, block.start)
    return "\n".join(splice_section_block(lines, insert_at, ["[DONE]", done_line, ""]))
