"""
EnquiryService - Enquiries sent to one business, to a whole business type
or to the chamber itself from the contact page.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.core.ports.email import MailerPort
from src.domain.entities import BusinessEnquiry, ContactEnquiry, Enquiry

from .models import EnquiryError, EnquiryInput
from .ports import BusinessLookupPort, EnquiryRepoPort, TypeLookupPort, UserLookupPort

logger = logging.getLogger(__name__)


class EnquiryService:
    def __init__(
        self,
        repo: EnquiryRepoPort,
        businesses: BusinessLookupPort,
        types: TypeLookupPort,
        users: UserLookupPort,
        mailer: MailerPort,
    ) -> None:
        self._repo = repo
        self._businesses = businesses
        self._types = types
        self._users = users
        self._mailer = mailer

    def make_business_enquiry(
        self, user_id: UUID, business_slug: str, data: EnquiryInput
    ) -> tuple[BusinessEnquiry | None, list[EnquiryError]]:
        business = self._businesses.get_by_slug(business_slug)
        if not business:
            return None, [EnquiryError("business_not_found", "Business not found")]

        enquiry = self._repo.save_business_enquiry(
            BusinessEnquiry(
                business_id=business.id,
                user_id=user_id,
                name=data.name,
                email=data.email,
                phone=data.phone,
                message=data.message,
            )
        )
        logger.info("Enquiry %s sent to business %s", enquiry.id, business.slug)

        owner = self._users.get_by_id(business.owner_id)
        if owner:
            self._mailer.send_template(
                "business-enquiry",
                {"name": owner.name, "enquiry": data.message},
                owner.email,
                f"New enquiry for {business.name}",
            )
        return enquiry, []

    def make_general_enquiry(
        self, user_id: UUID, type_slug: str, data: EnquiryInput
    ) -> tuple[Enquiry | None, list[EnquiryError]]:
        business_type = self._types.get_type_by_slug(type_slug)
        if not business_type:
            return None, [EnquiryError("type_not_found", "Business type not found")]

        enquiry = self._repo.save_enquiry(
            Enquiry(
                business_type_id=business_type.id,
                user_id=user_id,
                name=data.name,
                email=data.email,
                phone=data.phone,
                message=data.message,
            )
        )
        return enquiry, []

    def make_contact_enquiry(self, data: EnquiryInput) -> ContactEnquiry:
        contact = self._repo.save_contact(
            ContactEnquiry(
                name=data.name, email=data.email, phone=data.phone, message=data.message
            )
        )
        logger.info("Contact enquiry %s received", contact.id)
        return contact

    def list_contacts(self) -> list[ContactEnquiry]:
        return self._repo.list_contacts()

    def toggle_contact_resolved(
        self, contact_id: UUID
    ) -> tuple[ContactEnquiry | None, list[EnquiryError]]:
        contact = self._repo.get_contact(contact_id)
        if not contact:
            return None, [EnquiryError("contact_not_found", "Contact not found")]

        contact.is_resolved = not contact.is_resolved
        return self._repo.save_contact(contact), []

    def list_for_user(self, user_id: UUID) -> list[BusinessEnquiry]:
        return self._repo.list_business_enquiries(user_id=user_id)

    def list_for_business(self, business_id: UUID) -> list[BusinessEnquiry]:
        return self._repo.list_business_enquiries(business_id=business_id)

    def list_general_for_type(self, type_id: UUID) -> list[Enquiry]:
        return self._repo.list_enquiries(business_type_id=type_id)

    def toggle_resolved(
        self, enquiry_id: UUID, owner_id: UUID | None = None
    ) -> tuple[BusinessEnquiry | None, list[EnquiryError]]:
        """Flip is_resolved; with owner_id, only that owner's enquiries are reachable."""
        enquiry = self._repo.get_business_enquiry(enquiry_id)
        if enquiry and owner_id is not None:
            business = self._businesses.get_by_owner(owner_id)
            if not business or business.id != enquiry.business_id:
                enquiry = None
        if not enquiry:
            return None, [EnquiryError("enquiry_not_found", "Enquiry not found")]

        enquiry.is_resolved = not enquiry.is_resolved
        return self._repo.save_business_enquiry(enquiry), []
