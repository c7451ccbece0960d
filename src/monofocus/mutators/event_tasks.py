"""Event subtasks: attach, delete, and delete whole events."""

import logfire

from ..lines import (
    is_blank,
    is_child_line,
    is_separator,
    require_text,
    section_label,
    splice_lines,
    splice_section_block,
)
from ..locator import (
    body_start,
    find_all_date_blocks,
    find_date_block,
    find_section_within_block,
)
from ..schemas import DateBlock, SectionType
from ..tags import (
    base_text_of,
    extract_event_name,
    lines_match,
    normalize_for_match,
    strip_markers,
)


def _find_event_line(
    lines: list[str], block: DateBlock, event_raw_line: str
) -> int | None:
    """Index of the first top-level EVENTS line in ``block`` matching the event."""
    in_events = False
    for i in range(block.start + 1, block.end):
        line = lines[i]
        label = section_label(line)
        if label is not None:
            in_events = SectionType.from_label(label) == SectionType.EVENTS
            continue
        if not in_events or is_blank(line) or is_separator(line) or is_child_line(line):
            continue
        if lines_match(line, event_raw_line):
            return i
    return None


def attach_child_task(
    content: str, date: str, event_raw_line: str, task_name: str
) -> str:
    """Add ``task_name`` as a subtask of an event and as a DOING item.

    Every block for ``date`` is searched, so an event living in a later
    duplicate of the day is still found. The child goes right below the
    event line; the DOING item goes to the top of that same block's DOING
    section, which is created after EVENTS when missing.

    Args:
        content: Full journal text
        date: Date token (YYYY-MM-DD)
        event_raw_line: Event line as shown to the user
        task_name: Subtask text

    Returns:
        Updated journal text, or ``content`` unchanged if the event is missing
    """
    require_text("content", content)
    require_text("date", date)
    require_text("event_raw_line", event_raw_line)
    require_text("task_name", task_name)
    if not content or not date or not event_raw_line.strip() or not task_name.strip():
        return content

    lines = content.split("\n")
    blocks = find_all_date_blocks(lines, date)

    event_index = None
    target: DateBlock | None = None
    for block in blocks:
        event_index = _find_event_line(lines, block, event_raw_line)
        if event_index is not None:
            target = block
            break
    if event_index is None or target is None:
        logfire.debug("Event not found for subtask", date=date, event=event_raw_line)
        return content

    logfire.info(
        "Attaching subtask",
        date=date,
        event=extract_event_name(event_raw_line),
        task=task_name,
    )

    lines = splice_lines(lines, event_index + 1, 0, [f"  - {task_name}"])
    block_end = target.end + 1
    doing_item = f"- {task_name}"

    doing = find_section_within_block(lines, target.start, block_end, "[DOING]")
    if doing is not None:
        return "\n".join(splice_lines(lines, doing.header_index + 1, 0, [doing_item]))

    insert_at = body_start(lines, target.start)
    events = find_section_within_block(lines, target.start, block_end, "[EVENTS]")
    if events is not None:
        insert_at = events.end_index
    block = ["[DOING]", doing_item, ""]
    return "\n".join(splice_section_block(lines, insert_at, block))


def delete_event(content: str, date: str, event_raw_line: str) -> str:
    """Remove an event line together with its indented subtasks.

    Sibling events before and after are left alone.
    """
    require_text("content", content)
    require_text("date", date)
    require_text("event_raw_line", event_raw_line)
    if not content or not date or not event_raw_line.strip():
        return content

    lines = content.split("\n")
    block = find_date_block(lines, date)
    if block is None:
        return content
    events = find_section_within_block(lines, block.start, block.end, "[EVENTS]")
    if events is None:
        return content

    event_index = None
    for i in range(events.header_index + 1, events.end_index):
        line = lines[i]
        if is_blank(line) or is_child_line(line):
            continue
        if lines_match(line, event_raw_line):
            event_index = i
            break
    if event_index is None:
        logfire.debug("Event not found for delete", date=date, event=event_raw_line)
        return content

    # Contiguous run of indented children
    stop = event_index + 1
    while (
        stop < events.end_index
        and is_child_line(lines[stop])
        and not is_blank(lines[stop])
    ):
        stop += 1

    return "\n".join(splice_lines(lines, event_index, stop - event_index))


def delete_event_subtask(content: str, date: str, subtask_raw_line: str) -> str:
    """Remove an event subtask and, if present, its mirrored DOING line."""
    require_text("content", content)
    require_text("date", date)
    require_text("subtask_raw_line", subtask_raw_line)
    if not content or not date or not subtask_raw_line.strip():
        return content

    lines = content.split("\n")
    block = find_date_block(lines, date)
    if block is None:
        return content
    events = find_section_within_block(lines, block.start, block.end, "[EVENTS]")
    if events is None:
        return content

    removed_text = ""
    for i in range(events.header_index + 1, events.end_index):
        line = lines[i]
        if not is_child_line(line):
            continue
        if lines_match(line, subtask_raw_line):
            removed_text = strip_markers(line)
            lines = splice_lines(lines, i, 1)
            break
    if not removed_text:
        logfire.debug("Subtask not found", date=date, subtask=subtask_raw_line)
        return content

    block = find_date_block(lines, date)
    doing = (
        find_section_within_block(lines, block.start, block.end, "[DOING]")
        if block is not None
        else None
    )
    if doing is None:
        return "\n".join(lines)

    match_norm = normalize_for_match(removed_text)
    for i in range(doing.header_index + 1, doing.end_index):
        trimmed = lines[i].strip()
        if not trimmed or is_separator(trimmed):
            continue
        if normalize_for_match(base_text_of(trimmed)) == match_norm:
            lines = splice_lines(lines, i, 1)
            break

    return "\n".join(lines)
