"""Shared fixtures for journal tests."""

import logfire
import pytest

from monofocus.templates import SEPARATOR

logfire.configure(send_to_logfire=False, console=False)

DATE = "2025-12-15"


def doc(*lines: str) -> str:
    """Join lines into a journal document."""
    return "\n".join(lines)


@pytest.fixture
def standup_day() -> str:
    """A day with one event carrying a subtask mirrored into DOING."""
    return doc(
        DATE,
        SEPARATOR,
        "[EVENTS]",
        "10:00 AM - Team Standup",
        "  - Draft agenda",
        "",
        "[DOING]",
        "- Draft agenda #Team_Standup",
        "- Another thing",
        "",
        "[DONE]",
        "x Old thing",
        "",
    )


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the CLI at a temporary data directory."""
    path = tmp_path / "data"
    monkeypatch.setenv("MONOFOCUS_DATA_DIR", str(path))
    return path
