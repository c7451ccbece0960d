"""Tests for inline slash-command detection."""

import pytest

from monofocus.commands import (
    CommandKind,
    detect_command_at_cursor,
    strip_range,
    strip_trailing_command,
)


class TestDetectCommandAtCursor:
    def test_subtask_with_trailing_space(self):
        text = "hello /subtask "
        detected = detect_command_at_cursor(text, len(text))
        assert detected is not None
        assert detected.kind == CommandKind.SUBTASK
        assert detected.value == "/subtask"
        assert detected.start == len("hello ")
        assert detected.end == len(text)

    def test_subtask_at_start_of_text(self):
        detected = detect_command_at_cursor("/subtask", len("/subtask"))
        assert detected is not None
        assert detected.kind == CommandKind.SUBTASK
        assert detected.start == 0

    @pytest.mark.parametrize(
        "text,kind,value",
        [
            ("x /event   ", CommandKind.EVENT, "/event"),
            ("do thing /done   ", CommandKind.DONE, "/done"),
        ],
    )
    def test_event_and_done(self, text, kind, value):
        detected = detect_command_at_cursor(text, len(text))
        assert detected is not None
        assert detected.kind == kind
        assert detected.value == value

    def test_project_without_query(self):
        text = "note /project "
        detected = detect_command_at_cursor(text, len(text))
        assert detected is not None
        assert detected.kind == CommandKind.PROJECT
        assert detected.value == "/project"
        assert detected.query == ""

    def test_project_with_query(self):
        text = "note /proj Assistant"
        detected = detect_command_at_cursor(text, len(text))
        assert detected is not None
        assert detected.kind == CommandKind.PROJECT
        assert detected.value == "/proj"
        assert detected.query == "Assistant"

    def test_similar_prefix_is_ignored(self):
        text = "hello /subtasks "
        assert detect_command_at_cursor(text, len(text)) is None

    def test_command_must_end_before_cursor(self):
        text = "hello /done world"
        assert detect_command_at_cursor(text, len(text)) is None
        assert detect_command_at_cursor(text, len("hello /done")) is not None

    def test_out_of_range_cursor(self):
        assert detect_command_at_cursor("/done", 99) is None
        assert detect_command_at_cursor("/done", -1) is None


class TestStripRange:
    def test_removes_command_and_keeps_cursor_at_start(self):
        text = "hello /subtask "
        detected = detect_command_at_cursor(text, len(text))
        assert detected is not None
        assert strip_range(text, detected.start, detected.end) == (
            "hello ",
            len("hello "),
        )

    def test_clamps_bounds(self):
        assert strip_range("abc", 2, 10) == ("ab", 2)
        assert strip_range("abc", -5, 1) == ("bc", 0)


class TestStripTrailingCommand:
    def test_drops_done(self):
        assert strip_trailing_command("- Task /done") == "- Task"

    def test_case_insensitive(self):
        assert strip_trailing_command("- Task /DONE  ") == "- Task"

    def test_keeps_plain_line(self):
        assert strip_trailing_command("- Task") == "- Task"
