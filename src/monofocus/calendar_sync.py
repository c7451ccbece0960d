"""Calendar boundary: event line formatting and section sync.

Fetching is injected by the host; no network or OAuth code lives here.
"""

from datetime import date as Date
from datetime import datetime
from typing import Protocol

import logfire

from .lines import require_text
from .mutators import update_section_for_date


class EventFetcher(Protocol):
    """Callable returning formatted event lines for one provider and date."""

    def __call__(self, provider: str, date: str) -> list[str]: ...


def format_event_line(
    title: str | None, start: datetime | Date | None = None, all_day: bool = False
) -> str:
    """Format a calendar event as a journal line.

    Examples:
        "09:00 AM - Standup"
        "All Day - Offsite"
    """
    summary = (title or "").strip() or "(No title)"
    if all_day or not isinstance(start, datetime):
        return f"All Day - {summary}"
    return f"{start.strftime('%I:%M %p')} - {summary}"


@logfire.instrument("sync_events_for_date")
def sync_events_for_date(
    content: str, date: str, provider: str, fetch: EventFetcher
) -> str:
    """Replace the EVENTS section of ``date`` with the provider's events.

    A failed fetch or an empty result leaves the journal unchanged.

    Args:
        content: Full journal text
        date: Date token (YYYY-MM-DD)
        provider: Provider name handed to ``fetch`` (e.g. "google")
        fetch: Injected event source

    Returns:
        Updated journal text
    """
    require_text("content", content)
    require_text("date", date)

    try:
        events = fetch(provider, date)
    except Exception as e:
        logfire.error(
            "Calendar fetch failed", provider=provider, date=date, error=str(e)
        )
        return content

    if not events:
        logfire.info("No events found", provider=provider, date=date)
        return content

    logfire.info("Synced events", provider=provider, date=date, count=len(events))
    return update_section_for_date(content, date, "EVENTS", events)
