"""
Business component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import Business, BusinessType, Service, Testimonial, User


class BusinessRepoPort(Protocol):
    def save(self, business: Business) -> Business: ...
    def get_by_id(self, business_id: UUID) -> Business | None: ...
    def get_by_slug(self, slug: str) -> Business | None: ...
    def get_by_owner(self, owner_id: UUID) -> Business | None: ...
    def list_all(self) -> list[Business]: ...
    def list_verified(self) -> list[Business]: ...
    def list_by_type(self, type_id: UUID) -> list[Business]: ...
    def count(self, verified_only: bool = False) -> int: ...


class ServiceRepoPort(Protocol):
    def save(self, service: Service) -> Service: ...
    def get_by_id(self, service_id: UUID) -> Service | None: ...
    def list_by_business(self, business_id: UUID) -> list[Service]: ...
    def delete(self, service_id: UUID) -> None: ...


class TestimonialRepoPort(Protocol):
    def save(self, testimonial: Testimonial) -> Testimonial: ...
    def list_by_business(self, business_id: UUID) -> list[Testimonial]: ...
    def exists(self, business_id: UUID, author_business_id: UUID) -> bool: ...


class TypeLookupPort(Protocol):
    def get_type_by_id(self, type_id: UUID) -> BusinessType | None: ...


class UserLookupPort(Protocol):
    def get_by_id(self, user_id: UUID) -> User | None: ...
