"""
Events component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import BusinessCategory, Event, EventRegistration


class EventRepoPort(Protocol):
    def save(self, event: Event) -> Event: ...
    def get_by_id(self, event_id: UUID) -> Event | None: ...
    def get_by_slug(self, slug: str) -> Event | None: ...
    def list_all(self, is_completed: bool | None = None) -> list[Event]: ...
    def latest_completed(self, limit: int) -> list[Event]: ...
    def delete(self, event_id: UUID) -> None: ...
    def count(self) -> int: ...
    def save_registration(self, registration: EventRegistration) -> EventRegistration: ...
    def list_registrations(self, event_id: UUID) -> list[EventRegistration]: ...


class CategoryLookupPort(Protocol):
    def get_category_by_id(self, category_id: UUID) -> BusinessCategory | None: ...
