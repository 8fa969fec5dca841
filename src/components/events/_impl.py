"""
EventService - Chamber events, their photo galleries and registrations.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from src.components.directory import slugify
from src.core.ports.email import MailerPort
from src.domain.entities import Event, EventImage, EventRegistration

from .models import EVENT_EXISTS, EVENT_NOT_FOUND, LATEST_EVENTS_LIMIT, EventError
from .ports import CategoryLookupPort, EventRepoPort

logger = logging.getLogger(__name__)


class EventService:
    def __init__(
        self,
        repo: EventRepoPort,
        categories: CategoryLookupPort,
        mailer: MailerPort,
    ) -> None:
        self._repo = repo
        self._categories = categories
        self._mailer = mailer

    # --- Queries ---

    def get(self, event_id: UUID) -> Event | None:
        return self._repo.get_by_id(event_id)

    def list_all(self) -> list[Event]:
        return self._repo.list_all()

    def list_completed(self) -> list[Event]:
        return self._repo.list_all(is_completed=True)

    def list_upcoming(self) -> list[Event]:
        return self._repo.list_all(is_completed=False)

    def latest(self) -> list[Event]:
        """Most recently created completed events."""
        return self._repo.latest_completed(LATEST_EVENTS_LIMIT)

    def count(self) -> int:
        return self._repo.count()

    def registrations(self, event_id: UUID) -> list[EventRegistration]:
        return self._repo.list_registrations(event_id)

    # --- Commands ---

    def create_event(
        self, title: str, description: str, date: datetime
    ) -> tuple[Event | None, list[EventError]]:
        slug = slugify(title)
        if self._repo.get_by_slug(slug):
            return None, [EVENT_EXISTS]

        event = self._repo.save(Event(title=title, slug=slug, description=description, date=date))
        logger.info("Event created: %s", event.slug)
        return event, []

    def update_event(
        self,
        event_id: UUID,
        title: str,
        description: str,
        date: datetime,
    ) -> tuple[Event | None, list[EventError]]:
        event = self._repo.get_by_id(event_id)
        if not event:
            return None, [EVENT_NOT_FOUND]

        slug = slugify(title)
        existing = self._repo.get_by_slug(slug)
        if existing and existing.id != event.id:
            return None, [EVENT_EXISTS]

        event.title = title
        event.slug = slug
        event.description = description
        event.date = date
        return self._repo.save(event), []

    def toggle_completion(self, event_id: UUID) -> tuple[Event | None, list[EventError]]:
        event = self._repo.get_by_id(event_id)
        if not event:
            return None, [EVENT_NOT_FOUND]

        event.is_completed = not event.is_completed
        return self._repo.save(event), []

    def add_image(
        self, event_id: UUID, url: str, description: str = ""
    ) -> tuple[Event | None, list[EventError]]:
        event = self._repo.get_by_id(event_id)
        if not event:
            return None, [EVENT_NOT_FOUND]

        event.images.append(EventImage(url=url, description=description))
        return self._repo.save(event), []

    def delete(self, event_id: UUID) -> tuple[bool, list[EventError]]:
        if not self._repo.get_by_id(event_id):
            return False, [EVENT_NOT_FOUND]
        self._repo.delete(event_id)
        return True, []

    def register(
        self,
        event_id: UUID,
        category_id: UUID,
        name: str,
        email: str,
        phone: str,
        business_name: str,
        location: str,
        is_member: bool = False,
    ) -> tuple[EventRegistration | None, list[EventError]]:
        event = self._repo.get_by_id(event_id)
        if not event:
            return None, [EVENT_NOT_FOUND]
        if event.is_completed:
            return None, [EventError("event_completed", "Registrations for this event are closed")]
        if not self._categories.get_category_by_id(category_id):
            return None, [
                EventError("category_not_found", "Business category not found", "category_id")
            ]

        registration = self._repo.save_registration(
            EventRegistration(
                event_id=event.id,
                category_id=category_id,
                name=name,
                email=email,
                phone=phone,
                business_name=business_name,
                is_member=is_member,
                location=location,
            )
        )
        logger.info("Registration %s for event %s", registration.id, event.slug)

        self._mailer.send_template(
            "event-registration",
            {
                "name": name,
                "event_name": event.title,
                "description": event.description,
                "image_url": event.images[0].url if event.images else None,
            },
            email,
            f"Registration successful for {event.title}",
        )
        return registration, []
