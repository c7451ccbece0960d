"""Tests for the project board text view and project note dates."""

import re

from monofocus.projects import (
    format_projects_as_text,
    get_project_note_dates_chronological,
    insert_project_note_date,
)
from monofocus.schemas import ProjectRecord
from monofocus.templates import SEPARATOR


class TestFormatProjectsAsText:
    def test_empty_hint(self):
        out = format_projects_as_text([])
        assert out.startswith("[PROJECTS]\n")
        assert "# Add your first project" in out

    def test_status_and_reason(self):
        out = format_projects_as_text(
            [
                ProjectRecord(
                    name="AssistantOS",
                    description="local AI assistant replacing cloud services",
                    status="active",
                    blocking_or_reason="mobile app connectivity",
                ),
                ProjectRecord(
                    name="MonoFocus",
                    description="calendar note-taking app",
                    status="shipped",
                ),
            ]
        )
        assert (
            "\nAssistantOS #active - local AI assistant replacing cloud services\n"
            "  - blocking: mobile app connectivity\n"
        ) in out
        assert "\nMonoFocus #shipped - calendar note-taking app\n" in out

    def test_paused_reason_prefix_and_untitled(self):
        out = format_projects_as_text(
            [ProjectRecord(name=" ", status="paused", blocking_or_reason="waiting")]
        )
        assert "(Untitled) #paused\n  - paused: waiting\n" in out


class TestProjectNoteDates:
    def test_insert_at_cursor_with_clean_spacing(self):
        original = "Some intro\n"
        notes, cursor, inserted = insert_project_note_date(
            original, "2025-12-19", len(original)
        )
        assert inserted
        assert re.search(
            rf"Some intro\n\n2025-12-19\n{SEPARATOR}\n\n", notes
        )
        assert notes[:cursor].endswith(f"{SEPARATOR}\n\n")

    def test_existing_date_is_not_duplicated(self):
        original = f"2025-12-18\n{SEPARATOR}\n\nDid stuff\n"
        assert insert_project_note_date(original, "2025-12-18", 0) == (
            original,
            0,
            False,
        )

    def test_chronological_order(self):
        notes = "\n".join(
            ["2025-12-19", SEPARATOR, "", "x", "", "2025-12-18", SEPARATOR, "", "y"]
        )
        assert get_project_note_dates_chronological(notes) == [
            "2025-12-18",
            "2025-12-19",
        ]
