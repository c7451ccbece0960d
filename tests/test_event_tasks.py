"""Tests for event subtasks and event deletion."""

from conftest import DATE, doc
from monofocus.mutators import attach_child_task, delete_event, delete_event_subtask
from monofocus.templates import SEPARATOR

MEETING_DAY = doc(
    DATE,
    SEPARATOR,
    "[EVENTS]",
    "02:30 PM - Team Meeting",
    "",
    "[DOING]",
    "",
    "[DONE]",
    "",
    "[NOTES]",
    "",
)


class TestAttachChildTask:
    def test_adds_child_and_doing_item(self):
        out = attach_child_task(
            MEETING_DAY, DATE, "02:30 PM - Team Meeting", "Prepare slides"
        )
        assert out == doc(
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "02:30 PM - Team Meeting",
            "  - Prepare slides",
            "",
            "[DOING]",
            "- Prepare slides",
            "",
            "[DONE]",
            "",
            "[NOTES]",
            "",
        )
        assert "\n\n\n" not in out

    def test_finds_event_in_later_duplicate_block(self):
        content = doc(
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "",
            "[DOING]",
            "",
            "[DONE]",
            "",
            "[NOTES]",
            "",
            "",
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "02:30 PM - Team Meeting",
            "04:00 PM - Daily Standup",
            "",
            "[DOING]",
            "",
            "[DONE]",
            "",
            "[NOTES]",
            "",
        )
        lines = attach_child_task(
            content, DATE, "02:30 PM - Team Meeting", "Prepare slides"
        ).split("\n")

        # First block untouched
        assert lines[4:6] == ["[DOING]", ""]
        assert lines[14:16] == ["02:30 PM - Team Meeting", "  - Prepare slides"]
        assert lines[18:20] == ["[DOING]", "- Prepare slides"]

    def test_normalized_event_match(self):
        out = attach_child_task(
            MEETING_DAY, DATE, "  02:30 PM -  team meeting  ", "Prepare slides"
        )
        assert "02:30 PM - Team Meeting\n  - Prepare slides" in out

    def test_creates_doing_after_events(self):
        content = doc(DATE, "[EVENTS]", "Meeting", "", "[NOTES]", "n", "")
        out = attach_child_task(content, DATE, "Meeting", "T")
        assert out == doc(
            DATE,
            "[EVENTS]",
            "Meeting",
            "  - T",
            "",
            "[DOING]",
            "- T",
            "",
            "[NOTES]",
            "n",
            "",
        )

    def test_creates_doing_at_end_of_document(self):
        content = doc(DATE, SEPARATOR, "[EVENTS]", "09:00 AM - X", "", "")
        out = attach_child_task(content, DATE, "09:00 AM - X", "prep")
        assert out == doc(
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "09:00 AM - X",
            "  - prep",
            "",
            "[DOING]",
            "- prep",
            "",
        )
        assert "\n\n\n" not in out

    def test_no_tag_written_to_doing(self):
        out = attach_child_task(MEETING_DAY, DATE, "02:30 PM - Team Meeting", "X")
        assert "#Team_Meeting" not in out

    def test_unknown_event_is_noop(self):
        assert attach_child_task(MEETING_DAY, DATE, "Nope", "T") == MEETING_DAY

    def test_lines_outside_events_do_not_match(self):
        content = doc(DATE, "[DOING]", "Meeting", "[EVENTS]", "Other")
        assert attach_child_task(content, DATE, "Meeting", "T") == content

    def test_unknown_date_is_noop(self):
        out = attach_child_task(
            MEETING_DAY, "2030-01-01", "02:30 PM - Team Meeting", "T"
        )
        assert out == MEETING_DAY

    def test_empty_task_is_noop(self):
        out = attach_child_task(MEETING_DAY, DATE, "02:30 PM - Team Meeting", "  ")
        assert out == MEETING_DAY


class TestDeleteEvent:
    def test_removes_event_and_children_only(self):
        content = doc(
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "09:00 AM - Before",
            "  - before child",
            "10:00 AM - Team Standup",
            "  - Draft agenda",
            "\tx Review notes",
            "02:00 PM - Deep Work Session",
            "",
            "[DOING]",
            "",
        )
        out = delete_event(content, DATE, "10:00 AM - Team Standup")
        assert out == doc(
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "09:00 AM - Before",
            "  - before child",
            "02:00 PM - Deep Work Session",
            "",
            "[DOING]",
            "",
        )

    def test_only_in_requested_day(self):
        content = doc(
            "2025-12-14",
            "[EVENTS]",
            "09:00 AM - Meeting",
            "",
            DATE,
            "[EVENTS]",
            "09:00 AM - Meeting",
            "",
        )
        out = delete_event(content, DATE, "09:00 AM - Meeting")
        assert out == doc(
            "2025-12-14", "[EVENTS]", "09:00 AM - Meeting", "", DATE, "[EVENTS]", ""
        )

    def test_not_found_is_noop(self):
        assert delete_event(MEETING_DAY, DATE, "Nonexistent Event") == MEETING_DAY

    def test_child_line_is_not_an_event(self):
        content = doc(DATE, "[EVENTS]", "Meeting", "  - sub")
        assert delete_event(content, DATE, "  - sub") == content


class TestDeleteEventSubtask:
    def test_removes_child_and_doing_mirror(self):
        content = doc(
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "10:00 AM - Team Standup",
            "  - Draft agenda",
            "",
            "[DOING]",
            "- Draft agenda",
            "- Something else",
            "",
            "[DONE]",
            "",
        )
        out = delete_event_subtask(content, DATE, "  - Draft agenda")
        assert out == doc(
            DATE,
            SEPARATOR,
            "[EVENTS]",
            "10:00 AM - Team Standup",
            "",
            "[DOING]",
            "- Something else",
            "",
            "[DONE]",
            "",
        )

    def test_mirror_matched_without_tags(self, standup_day):
        out = delete_event_subtask(standup_day, DATE, "  - Draft agenda")
        assert "Draft agenda" not in out
        assert "- Another thing" in out

    def test_completed_child_without_mirror(self):
        content = doc(
            DATE, "[EVENTS]", "Standup", "  - a", "  x Already done", "[DOING]", "- b"
        )
        out = delete_event_subtask(content, DATE, "  x Already done")
        assert out == doc(DATE, "[EVENTS]", "Standup", "  - a", "[DOING]", "- b")

    def test_not_found_is_noop(self, standup_day):
        assert delete_event_subtask(standup_day, DATE, "  - Missing") == standup_day

    def test_top_level_event_is_not_a_subtask(self, standup_day):
        out = delete_event_subtask(standup_day, DATE, "10:00 AM - Team Standup")
        assert out == standup_day
