"""
Enquiries component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import (
    Business,
    BusinessEnquiry,
    BusinessType,
    ContactEnquiry,
    Enquiry,
    User,
)


class EnquiryRepoPort(Protocol):
    def save_business_enquiry(self, enquiry: BusinessEnquiry) -> BusinessEnquiry: ...
    def get_business_enquiry(self, enquiry_id: UUID) -> BusinessEnquiry | None: ...

    def list_business_enquiries(
        self,
        business_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> list[BusinessEnquiry]: ...

    def save_enquiry(self, enquiry: Enquiry) -> Enquiry: ...

    def list_enquiries(
        self,
        business_type_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> list[Enquiry]: ...

    def save_contact(self, contact: ContactEnquiry) -> ContactEnquiry: ...
    def get_contact(self, contact_id: UUID) -> ContactEnquiry | None: ...
    def list_contacts(self) -> list[ContactEnquiry]: ...


class BusinessLookupPort(Protocol):
    def get_by_slug(self, slug: str) -> Business | None: ...
    def get_by_owner(self, owner_id: UUID) -> Business | None: ...


class TypeLookupPort(Protocol):
    def get_type_by_slug(self, slug: str) -> BusinessType | None: ...


class UserLookupPort(Protocol):
    def get_by_id(self, user_id: UUID) -> User | None: ...
