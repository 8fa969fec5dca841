"""
Events component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

# Completed events shown on the landing page
LATEST_EVENTS_LIMIT = 2


@dataclass(frozen=True)
class EventError:
    """Event error."""

    code: str
    message: str
    field: str | None = None


EVENT_NOT_FOUND = EventError("event_not_found", "Event not found")
EVENT_EXISTS = EventError("event_exists", "An event with this title already exists", "title")
