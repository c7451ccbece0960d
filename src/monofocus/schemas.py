"""Models for parsed journal days and line ranges."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class SectionType(str, Enum):
    """Semantic type of a ``[LABEL]`` section."""

    EVENTS = "EVENTS"
    DOING = "DOING"
    DONE = "DONE"
    NOTES = "NOTES"
    BACKLOG = "BACKLOG"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_label(cls, label: str) -> "SectionType":
        """Type a label by substring, e.g. ``Events today`` is EVENTS."""
        title = label.upper()
        if "EVENT" in title:
            return cls.EVENTS
        if "DOING" in title:
            return cls.DOING
        if "DONE" in title:
            return cls.DONE
        if "NOTE" in title:
            return cls.NOTES
        if "BACKLOG" in title:
            return cls.BACKLOG
        return cls.UNKNOWN


class ParsedItem(BaseModel):
    """One content line of a section."""

    raw_line: str = Field(description="Exact original line, used for matching")
    display_text: str = Field(description="Line without completion marker or bullet")
    is_completed: bool = False
    children: list["ParsedItem"] = Field(default_factory=list)


class ParsedSection(BaseModel):
    """A ``[LABEL]`` section with its items."""

    type: SectionType
    title: str = Field(description="Uppercased label text")
    items: list[ParsedItem] = Field(default_factory=list)


class ParsedDay(BaseModel):
    """All sections under one date header."""

    date: str
    sections: list[ParsedSection] = Field(default_factory=list)
    start_index: int = Field(default=0, description="Line index of the date header")

    def section(self, section_type: SectionType) -> ParsedSection | None:
        """First section of the given type, if any."""
        for section in self.sections:
            if section.type == section_type:
                return section
        return None


ProjectStatus = Literal["active", "paused", "killed", "shipped"]


class ProjectRecord(BaseModel):
    """A project as handed over by the project board."""

    name: str = ""
    description: str = ""
    status: ProjectStatus = "active"
    blocking_or_reason: str | None = None


@dataclass(frozen=True)
class DateBlock:
    """Half-open line range ``[start, end)`` of one date block."""

    start: int
    end: int


@dataclass(frozen=True)
class SectionRange:
    """Header line index and exclusive end index of a section."""

    header_index: int
    end_index: int
