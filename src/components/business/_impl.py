"""
BusinessService - Member businesses, their services and testimonials.

One business per owner. Slugs come from the business name and must be
unique across the directory.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from src.components.directory import slugify
from src.core.ports.email import MailerPort
from src.domain.entities import Business, GalleryImage, Service, Testimonial, User
from src.domain.forms import BusinessForm, BusinessUpdateForm

from .models import BUSINESS_NOT_FOUND, PROFILE_FIELDS, BusinessError
from .ports import (
    BusinessRepoPort,
    ServiceRepoPort,
    TestimonialRepoPort,
    TypeLookupPort,
    UserLookupPort,
)

logger = logging.getLogger(__name__)


def _parse_id(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None


class BusinessService:
    def __init__(
        self,
        businesses: BusinessRepoPort,
        services: ServiceRepoPort,
        testimonials: TestimonialRepoPort,
        types: TypeLookupPort,
        users: UserLookupPort,
        mailer: MailerPort,
    ) -> None:
        self._businesses = businesses
        self._services = services
        self._testimonials = testimonials
        self._types = types
        self._users = users
        self._mailer = mailer

    # --- Queries ---

    def get(self, business_id: UUID) -> Business | None:
        return self._businesses.get_by_id(business_id)

    def get_by_slug(self, slug: str) -> Business | None:
        return self._businesses.get_by_slug(slug)

    def get_by_owner(self, owner_id: UUID) -> Business | None:
        return self._businesses.get_by_owner(owner_id)

    def list_all(self) -> list[Business]:
        return self._businesses.list_all()

    def list_verified(self) -> list[Business]:
        return self._businesses.list_verified()

    def list_by_type(self, type_id: UUID) -> list[Business]:
        """Verified businesses of a type."""
        return self._businesses.list_by_type(type_id)

    def count(self) -> int:
        return self._businesses.count()

    def count_verified(self) -> int:
        return self._businesses.count(verified_only=True)

    # --- Profile ---

    def _check_type(self, form: BusinessForm) -> tuple[UUID | None, list[BusinessError]]:
        type_id = _parse_id(form.type_id)
        business_type = self._types.get_type_by_id(type_id) if type_id else None
        if business_type is None:
            return None, [BusinessError("type_not_found", "Business type not found", "type_id")]
        if business_type.category_id != _parse_id(form.category_id):
            return None, [
                BusinessError(
                    "type_not_in_category",
                    "Business type does not belong to the selected category",
                    "type_id",
                )
            ]
        return business_type.id, []

    def _slug_taken(self, slug: str, business_id: UUID | None = None) -> bool:
        existing = self._businesses.get_by_slug(slug)
        return existing is not None and existing.id != business_id

    def onboard(
        self, owner: User, form: BusinessForm
    ) -> tuple[Business | None, list[BusinessError]]:
        if owner.type != "BUSINESS":
            return None, [
                BusinessError("forbidden", "Only business accounts can list a business")
            ]
        if self._businesses.get_by_owner(owner.id):
            return None, [
                BusinessError("business_exists", "You have already onboarded a business")
            ]

        type_id, errors = self._check_type(form)
        if errors or type_id is None:
            return None, errors

        slug = slugify(form.name)
        if self._slug_taken(slug):
            return None, [
                BusinessError(
                    "business_exists", "A business with this name already exists", "name"
                )
            ]

        business = Business(
            slug=slug,
            owner_id=owner.id,
            type_id=type_id,
            **{name: getattr(form, name) for name in PROFILE_FIELDS},
        )
        self._businesses.save(business)
        logger.info("Business onboarded: %s (owner %s)", business.slug, owner.id)
        return business, []

    def update(
        self, owner_id: UUID, form: BusinessUpdateForm
    ) -> tuple[Business | None, list[BusinessError]]:
        business = self._businesses.get_by_owner(owner_id)
        if not business:
            return None, [BUSINESS_NOT_FOUND]

        if isinstance(form, BusinessForm):
            type_id, errors = self._check_type(form)
            if errors or type_id is None:
                return None, errors
            business.type_id = type_id

        slug = slugify(form.name)
        if slug != business.slug and self._slug_taken(slug, business.id):
            return None, [
                BusinessError(
                    "business_exists", "A business with this name already exists", "name"
                )
            ]

        for name in PROFILE_FIELDS:
            setattr(business, name, getattr(form, name))
        business.slug = slug
        business.updated_at = datetime.utcnow()
        self._businesses.save(business)
        return business, []

    def toggle_verification(
        self, business_id: UUID
    ) -> tuple[Business | None, list[BusinessError]]:
        business = self._businesses.get_by_id(business_id)
        if not business:
            return None, [BUSINESS_NOT_FOUND]

        business.is_verified = not business.is_verified
        business.updated_at = datetime.utcnow()
        self._businesses.save(business)
        logger.info("Business %s verified=%s", business.slug, business.is_verified)

        if business.is_verified:
            owner = self._users.get_by_id(business.owner_id)
            if owner:
                self._mailer.send_template(
                    "business-verified",
                    {"name": owner.name, "business_name": business.name},
                    owner.email,
                    "Your business has been verified",
                )
        return business, []

    def add_gallery_image(
        self, owner_id: UUID, url: str, description: str = ""
    ) -> tuple[Business | None, list[BusinessError]]:
        business = self._businesses.get_by_owner(owner_id)
        if not business:
            return None, [BUSINESS_NOT_FOUND]

        business.gallery.append(GalleryImage(url=url, description=description))
        business.updated_at = datetime.utcnow()
        self._businesses.save(business)
        return business, []

    # --- Services ---

    def list_services(self, business_id: UUID) -> list[Service]:
        return self._services.list_by_business(business_id)

    def create_service(
        self,
        owner_id: UUID,
        title: str,
        description: str,
        image: str | None = None,
    ) -> tuple[Service | None, list[BusinessError]]:
        business = self._businesses.get_by_owner(owner_id)
        if not business:
            return None, [BUSINESS_NOT_FOUND]

        service = Service(
            business_id=business.id, title=title, description=description, image=image
        )
        return self._services.save(service), []

    def _owned_service(
        self, owner_id: UUID, service_id: UUID
    ) -> tuple[Service | None, list[BusinessError]]:
        business = self._businesses.get_by_owner(owner_id)
        if not business:
            return None, [BUSINESS_NOT_FOUND]

        service = self._services.get_by_id(service_id)
        if not service or service.business_id != business.id:
            return None, [BusinessError("service_not_found", "Service not found")]
        return service, []

    def update_service(
        self,
        owner_id: UUID,
        service_id: UUID,
        title: str,
        description: str,
        image: str | None = None,
    ) -> tuple[Service | None, list[BusinessError]]:
        service, errors = self._owned_service(owner_id, service_id)
        if errors or service is None:
            return None, errors

        service.title = title
        service.description = description
        service.image = image
        return self._services.save(service), []

    def delete_service(
        self, owner_id: UUID, service_id: UUID
    ) -> tuple[bool, list[BusinessError]]:
        service, errors = self._owned_service(owner_id, service_id)
        if errors or service is None:
            return False, errors

        self._services.delete(service.id)
        return True, []

    # --- Testimonials ---

    def list_testimonials(self, business_id: UUID) -> list[Testimonial]:
        return self._testimonials.list_by_business(business_id)

    def add_testimonial(
        self, user_id: UUID, business_slug: str, content: str
    ) -> tuple[Testimonial | None, list[BusinessError]]:
        business = self._businesses.get_by_slug(business_slug)
        if not business:
            return None, [BUSINESS_NOT_FOUND]

        author = self._businesses.get_by_owner(user_id)
        if not author:
            return None, [
                BusinessError(
                    "forbidden", "Only member businesses can write testimonials"
                )
            ]
        if author.id == business.id:
            return None, [
                BusinessError("forbidden", "You cannot write a testimonial for your own business")
            ]
        if self._testimonials.exists(business.id, author.id):
            return None, [
                BusinessError(
                    "testimonial_exists", "You have already written a testimonial", "content"
                )
            ]

        testimonial = Testimonial(
            business_id=business.id, author_business_id=author.id, content=content
        )
        return self._testimonials.save(testimonial), []
