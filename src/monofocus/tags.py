"""Trailing #tag handling, event names, and tolerant line matching."""

import re
from dataclasses import dataclass, field

_COMPLETION_PREFIX_RE = re.compile(r"^\s*x\s+", re.IGNORECASE)
_BULLET_PREFIX_RE = re.compile(r"^\s*-\s+")
_WHITESPACE_RE = re.compile(r"\s+")
_TIME_PREFIX_RE = re.compile(r"^\d{1,2}:\d{2}\s*(AM|PM)\s*-\s*", re.IGNORECASE)
_ALL_DAY_PREFIX_RE = re.compile(r"^all day\s*-\s*", re.IGNORECASE)
_NON_SLUG_RE = re.compile(r"[^a-zA-Z0-9\s]")


@dataclass
class TagSplit:
    """A line split into its text and its trailing tags."""

    base_text: str
    tags: list[str] = field(default_factory=list)


def strip_markers(line: str) -> str:
    """Trim a line and drop one leading ``x `` marker and one leading ``- `` bullet."""
    text = _COMPLETION_PREFIX_RE.sub("", (line or "").strip(), count=1)
    return _BULLET_PREFIX_RE.sub("", text, count=1).strip()


def normalize_for_match(line: str) -> str:
    """Normalize a line for tolerant comparison.

    Trims, strips the ``x ``/``- `` markers, collapses whitespace runs and
    lowercases, so text rendered slightly differently by a UI still matches
    what is stored.
    """
    text = _COMPLETION_PREFIX_RE.sub("", (line or "").strip(), count=1)
    text = _BULLET_PREFIX_RE.sub("", text, count=1)
    return _WHITESPACE_RE.sub(" ", text).strip().lower()


def lines_match(candidate: str, target: str) -> bool:
    """Exact, trimmed or normalized equality, in that order."""
    if candidate == target or candidate.strip() == target.strip():
        return True
    return normalize_for_match(candidate) == normalize_for_match(target)


def extract_tags_from_line(line: str) -> TagSplit:
    """Split trailing ``#tags`` off a line.

    Only tags at the end of the text count; a hashtag in the middle of a
    sentence stays part of the base text.

    Args:
        line: Raw item line, optionally prefixed with ``x `` or ``- ``

    Returns:
        TagSplit with the remaining text and the tags in their original order
    """
    working = strip_markers(line)
    if not working:
        return TagSplit(base_text="")

    tokens = working.split()
    tags: list[str] = []
    while tokens:
        last = tokens[-1]
        if last.startswith("#") and len(last) > 1:
            tags.insert(0, tokens.pop())
        else:
            break

    return TagSplit(base_text=" ".join(tokens).strip(), tags=tags)


def base_text_of(line: str) -> str:
    """Tag-stripped text of a line, falling back to the marker-stripped text."""
    cleaned = strip_markers(line)
    return (extract_tags_from_line(cleaned).base_text or cleaned).strip()


def tag_to_label(tag: str) -> str:
    """Turn ``#Team_Standup`` into ``Team Standup``."""
    raw = (tag or "").removeprefix("#").strip()
    return raw.replace("_", " ")


def extract_event_name(event_line: str) -> str:
    """Bare event name without markers and time-of-day prefix.

    Examples:
        "02:30 PM - Team Meeting" -> "Team Meeting"
        "All Day - Holiday" -> "Holiday"
    """
    cleaned = strip_markers(event_line)
    cleaned = _TIME_PREFIX_RE.sub("", cleaned, count=1)
    cleaned = _ALL_DAY_PREFIX_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def event_to_tag(event_name: str) -> str:
    """Convert an event name to a tag slug (``#Team_Meeting``)."""
    slug = _NON_SLUG_RE.sub("", event_name or "").strip()
    slug = _WHITESPACE_RE.sub("_", slug)
    return f"#{slug}" if slug else "#event"
