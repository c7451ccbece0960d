"""Text mutators operating on the raw journal lines."""

from .completion import toggle_completion
from .doing_done import get_doing_items_for_date, move_doing_to_done
from .event_tasks import attach_child_task, delete_event, delete_event_subtask
from .sections import update_section_for_date

__all__ = [
    "update_section_for_date",
    "attach_child_task",
    "toggle_completion",
    "move_doing_to_done",
    "get_doing_items_for_date",
    "delete_event",
    "delete_event_subtask",
]
