"""Merge repeated date blocks into one canonical block per date."""

from dataclasses import dataclass, field

import logfire

from .config import CANONICAL_SECTION_ORDER
from .lines import (
    is_blank,
    is_exact_date_header,
    is_separator,
    require_text,
    section_label,
)
from .templates import SEPARATOR

# Key for lines that sit between the separator and the first section header
_PREAMBLE = ""


@dataclass
class _DayAccumulator:
    """Sections collected for one date across all of its occurrences."""

    date: str
    separator: str
    sections: dict[str, list[str]] = field(default_factory=dict)
    order: list[str] = field(default_factory=list)


def _append_line(body: list[str], line: str, skip_duplicates: bool) -> None:
    """Append a body line, allowing at most one blank in a row."""
    if is_blank(line):
        if not body or not is_blank(body[-1]):
            body.append("")
        return
    if skip_duplicates and line in body:
        return
    body.append(line)


def _trim_blank_edges(body: list[str]) -> list[str]:
    start = 0
    while start < len(body) and is_blank(body[start]):
        start += 1
    end = len(body)
    while end > start and is_blank(body[end - 1]):
        end -= 1
    return body[start:end]


def _parse_block(block_lines: list[str]) -> tuple[dict[str, list[str]], list[str]]:
    """Split one date block body into sections keyed by ``[LABEL]``."""
    sections: dict[str, list[str]] = {}
    order: list[str] = []
    current = _PREAMBLE

    for raw in block_lines:
        label = section_label(raw)
        if label is not None:
            current = f"[{label.upper()}]"
        if current not in sections:
            sections[current] = []
            order.append(current)
        if label is None:
            _append_line(sections[current], raw, skip_duplicates=False)

    return sections, order


def _merge(
    day: _DayAccumulator, sections: dict[str, list[str]], order: list[str]
) -> None:
    for header in order:
        incoming = sections[header]
        if header not in day.sections:
            day.sections[header] = list(incoming)
            day.order.append(header)
            continue
        current = day.sections[header]
        # Edge blanks only separate sections; drop them before joining bodies
        while current and is_blank(current[-1]):
            current.pop()
        for line in _trim_blank_edges(incoming):
            _append_line(current, line, skip_duplicates=True)


def _render_day(day: _DayAccumulator) -> list[str]:
    preferred = [f"[{label}]" for label in CANONICAL_SECTION_ORDER]
    headers = [h for h in preferred if h in day.sections]
    headers += [h for h in day.order if h not in preferred and h != _PREAMBLE]

    out = [day.date, day.separator]
    preamble = _trim_blank_edges(day.sections.get(_PREAMBLE, []))
    if preamble:
        out.extend(preamble)
        if headers:
            out.append("")

    for index, header in enumerate(headers):
        out.append(header)
        out.extend(_trim_blank_edges(day.sections[header]))
        # Exactly one blank line between sections
        if index != len(headers) - 1:
            out.append("")

    # Exactly one blank line between days
    out.append("")
    return out


def dedupe_date_blocks(content: str) -> str:
    """Merge duplicate date headers into one block per date.

    Sections from every occurrence of a date are unioned: section order and
    line order follow first appearance, exact duplicate lines from later
    occurrences are dropped, and blank runs collapse to one blank line.
    Days keep their first-seen order; sections are rebuilt in canonical
    order (EVENTS, DOING, BACKLOG, DONE, NOTES, then anything else).

    Running it twice gives the same result as running it once.

    Args:
        content: Full journal text

    Returns:
        The rebuilt journal, or ``content`` unchanged when it has no dates
    """
    require_text("content", content)
    if not content:
        return content

    lines = content.split("\n")
    days: dict[str, _DayAccumulator] = {}
    leading: list[str] = []
    duplicates = 0

    i = 0
    while i < len(lines) and not is_exact_date_header(lines[i]):
        _append_line(leading, lines[i], skip_duplicates=False)
        i += 1

    while i < len(lines):
        date = lines[i].strip()
        i += 1

        separator = SEPARATOR
        if i < len(lines) and is_separator(lines[i]):
            separator = lines[i].strip()
            i += 1

        block_lines = []
        while i < len(lines) and not is_exact_date_header(lines[i]):
            block_lines.append(lines[i])
            i += 1

        sections, order = _parse_block(block_lines)
        if date in days:
            duplicates += 1
            _merge(days[date], sections, order)
        else:
            day = _DayAccumulator(date=date, separator=separator)
            _merge(day, sections, order)
            days[date] = day

    if not days:
        return content

    if duplicates:
        logfire.info("Merged duplicate date blocks", duplicates=duplicates)

    rebuilt: list[str] = []
    leading = _trim_blank_edges(leading)
    if leading:
        rebuilt.extend(leading)
        rebuilt.append("")
    for day in days.values():
        rebuilt.extend(_render_day(day))

    return "\n".join(rebuilt)
