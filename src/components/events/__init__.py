"""
Events component - Events, event galleries and registrations.
"""

from ._impl import EventService
from .models import EVENT_NOT_FOUND, LATEST_EVENTS_LIMIT, EventError
from .ports import CategoryLookupPort, EventRepoPort

__all__ = [
    "EventService",
    "EventError",
    "EVENT_NOT_FOUND",
    "LATEST_EVENTS_LIMIT",
    "EventRepoPort",
    "CategoryLookupPort",
]
