"""Project utilities: text view of the project board and dated project notes."""

import re

from .schemas import ProjectRecord, ProjectStatus
from .templates import SEPARATOR, extract_dates_from_content


def _reason_prefix(status: ProjectStatus) -> str:
    if status == "active":
        return "blocking"
    if status in ("paused", "killed"):
        return status
    return "note"


def format_projects_as_text(projects: list[ProjectRecord]) -> str:
    """Render projects as a ``[PROJECTS]`` block for the side panel.

    Each project becomes ``Name #status - description`` with its blocking
    reason (if any) as an indented child line.
    """
    lines = ["[PROJECTS]"]

    if not projects:
        lines.append("")
        lines.append("# Add your first project in the Projects view")
        return "\n".join(lines) + "\n"

    for project in projects:
        name = project.name.strip() or "(Untitled)"
        description = project.description.strip()
        main_line = f"{name} #{project.status}"
        if description:
            main_line += f" - {description}"
        lines.append(main_line)

        reason = (project.blocking_or_reason or "").strip()
        if reason:
            lines.append(f"  - {_reason_prefix(project.status)}: {reason}")

    return "\n".join(lines) + "\n"


def get_project_note_dates_chronological(notes: str) -> list[str]:
    """Dates in a project's notes, oldest first."""
    return list(reversed(extract_dates_from_content(notes)))


def insert_project_note_date(
    notes: str, date: str, cursor: int = 0
) -> tuple[str, int, bool]:
    """Insert a dated header into project notes at ``cursor``.

    An existing header for the date is never duplicated; the cursor then
    points at it instead. New headers are separated from preceding text by
    exactly one blank line.

    Args:
        notes: Project notes text
        date: Date token (YYYY-MM-DD)
        cursor: Insertion offset, clamped to the text

    Returns:
        Tuple of (notes, cursor, inserted)
    """
    text = notes or ""
    existing = re.search(rf"^{re.escape(date)}$", text, re.MULTILINE)
    if existing:
        return notes, existing.start(), False

    at = max(0, min(cursor, len(text)))
    before, after = text[:at], text[at:]

    prefix = ""
    if before.strip():
        if before.endswith("\n\n"):
            prefix = ""
        elif before.endswith("\n"):
            prefix = "\n"
        else:
            prefix = "\n\n"

    insert = f"{prefix}{date}\n{SEPARATOR}\n\n"
    return before + insert + after.lstrip("\n"), len(before) + len(insert), True
