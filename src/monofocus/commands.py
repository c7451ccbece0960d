"""Inline slash-command detection for the journal editor."""

import re
from dataclasses import dataclass
from enum import Enum


class CommandKind(str, Enum):
    """Type of inline command typed into the journal."""

    EVENT = "event"  # Pick an event to attach a subtask to
    SUBTASK = "subtask"  # Same as EVENT, reached from a task line
    DONE = "done"  # Move the current DOING line to DONE
    PROJECT = "project"  # Reference a project by name


_COMMAND_RE = re.compile(r"(^|\s)(/event|/subtask|/done)\s*$")
_PROJECT_RE = re.compile(r"(^|\s)(/project|/proj)(?:\s+([^\s/][^/\n]*?))?\s*$")
_TRAILING_COMMAND_RE = re.compile(r"\s/(?:done|event|subtask)\s*$", re.IGNORECASE)


@dataclass
class DetectedCommand:
    """A slash command found immediately before the cursor."""

    kind: CommandKind
    start: int  # Index of the '/' character
    end: int  # Cursor position (exclusive), including trailing whitespace
    value: str
    query: str = ""


def detect_command_at_cursor(text: str, cursor: int) -> DetectedCommand | None:
    """Detect a slash command right before the cursor.

    Trailing whitespace is allowed, so "/subtask " still counts. Project
    commands may carry a search query ("/proj Assistant").

    Args:
        text: Full editor text
        cursor: Cursor offset into ``text``

    Returns:
        The detected command, or None
    """
    if not isinstance(text, str) or not isinstance(cursor, int):
        return None
    if cursor < 0 or cursor > len(text):
        return None

    before = text[:cursor]

    match = _COMMAND_RE.search(before)
    if match:
        value = match.group(2)
        return DetectedCommand(
            kind=CommandKind(value[1:]),
            start=match.start(2),
            end=cursor,
            value=value,
        )

    match = _PROJECT_RE.search(before)
    if match:
        return DetectedCommand(
            kind=CommandKind.PROJECT,
            start=match.start(2),
            end=cursor,
            value=match.group(2),
            query=(match.group(3) or "").strip(),
        )

    return None


def strip_range(text: str, start: int, end: int) -> tuple[str, int]:
    """Remove ``text[start:end]`` and return the new text and cursor."""
    safe_start = max(0, min(start, len(text)))
    safe_end = max(safe_start, min(end, len(text)))
    return text[:safe_start] + text[safe_end:], safe_start


def strip_trailing_command(line: str) -> str:
    """Drop an inline command typed at the end of a line ("- Task /done")."""
    return _TRAILING_COMMAND_RE.sub("", line or "")
