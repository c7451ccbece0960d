"""Single-line classification for the journal grammar."""

import re

from .exceptions import InvalidArgumentError

DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")
EXACT_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
SECTION_HEADER_RE = re.compile(r"^\[(.*?)\]$")
COMPLETED_RE = re.compile(r"^x\s+", re.IGNORECASE)


def require_text(name: str, value: object) -> str:
    """Fail fast when a caller passes something other than a string."""
    if not isinstance(value, str):
        raise InvalidArgumentError(name, value)
    return value


def is_date_header(line: str) -> bool:
    """True if the trimmed line starts with a YYYY-MM-DD token."""
    return bool(DATE_PREFIX_RE.match((line or "").strip()))


def is_exact_date_header(line: str) -> bool:
    """True if the trimmed line is nothing but a YYYY-MM-DD token."""
    return bool(EXACT_DATE_RE.match((line or "").strip()))


def is_section_header(line: str) -> bool:
    """True if the trimmed line is a bracketed label like ``[DOING]``."""
    return bool(SECTION_HEADER_RE.match((line or "").strip()))


def section_label(line: str) -> str | None:
    """Return the text between the brackets of a section header, or None."""
    match = SECTION_HEADER_RE.match((line or "").strip())
    return match.group(1) if match else None


def is_separator(line: str) -> bool:
    return (line or "").strip().startswith("==")


def is_blank(line: str) -> bool:
    return (line or "").strip() == ""


def is_child_line(line: str) -> bool:
    """True if the raw line is indented (two spaces or a tab).

    Top-level items may carry a ``- `` bullet but never leading whitespace.
    """
    return (line or "").startswith("  ") or (line or "").startswith("\t")


def is_completed_line(line: str) -> bool:
    """True if the trimmed line starts with ``x `` (any case)."""
    return bool(COMPLETED_RE.match((line or "").strip()))


def leading_whitespace(line: str) -> str:
    match = re.match(r"^\s*", line or "")
    return match.group(0) if match else ""


def splice_lines(
    lines: list[str], index: int, remove: int = 0, insert: list[str] | None = None
) -> list[str]:
    """Return a new list with ``remove`` lines at ``index`` replaced by ``insert``."""
    return lines[:index] + list(insert or []) + lines[index + remove :]


def splice_section_block(lines: list[str], index: int, block: list[str]) -> list[str]:
    """Insert a ``[HEADER]`` block that ends in a blank line at ``index``.

    A blank line already at ``index`` serves as the block's trailing blank.
    At the end of a document that ends in a blank line run, the block goes
    before the last blank so the file keeps a single final newline.
    """
    block = list(block)
    if not block or not is_blank(block[-1]):
        return splice_lines(lines, index, 0, block)

    at_end = index == len(lines) and index >= 2
    if at_end and is_blank(lines[-1]) and is_blank(lines[-2]):
        index -= 1
    if index < len(lines) and is_blank(lines[index]):
        block.pop()
    return splice_lines(lines, index, 0, block)
