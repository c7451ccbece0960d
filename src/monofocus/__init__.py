"""Monofocus - plain-text daily journal engine."""

from .carry_over import get_carry_over_doing_items, seed_day_with_carry_over
from .commands import (
    CommandKind,
    DetectedCommand,
    detect_command_at_cursor,
    strip_range,
)
from .dedupe import dedupe_date_blocks
from .document_parser import get_day, parse_days
from .exceptions import InvalidArgumentError, MonofocusError
from .mutators import (
    attach_child_task,
    delete_event,
    delete_event_subtask,
    get_doing_items_for_date,
    move_doing_to_done,
    toggle_completion,
    update_section_for_date,
)
from .schemas import ParsedDay, ParsedItem, ParsedSection, SectionType
from .tags import extract_event_name, extract_tags_from_line, event_to_tag
from .templates import build_day_block, content_has_date, extract_dates_from_content

__all__ = [
    "update_section_for_date",
    "attach_child_task",
    "toggle_completion",
    "move_doing_to_done",
    "get_doing_items_for_date",
    "delete_event",
    "delete_event_subtask",
    "dedupe_date_blocks",
    "get_carry_over_doing_items",
    "seed_day_with_carry_over",
    "extract_dates_from_content",
    "content_has_date",
    "build_day_block",
    "parse_days",
    "get_day",
    "ParsedDay",
    "ParsedItem",
    "ParsedSection",
    "SectionType",
    "extract_tags_from_line",
    "extract_event_name",
    "event_to_tag",
    "CommandKind",
    "DetectedCommand",
    "detect_command_at_cursor",
    "strip_range",
    "MonofocusError",
    "InvalidArgumentError",
]
