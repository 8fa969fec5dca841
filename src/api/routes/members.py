"""
Member-facing actions: enquiries, the contact form, testimonials and event
registration.
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.api.deps import (
    get_business_service,
    get_current_user,
    get_enquiry_service,
    get_event_service,
    parse_uuid,
)
from src.api.errors import form_data, raise_for_errors, validate_or_400
from src.api.schemas import MessageResponse
from src.components.business import BusinessService
from src.components.enquiries import EnquiryInput, EnquiryService
from src.components.events import EventService
from src.domain.entities import BusinessEnquiry, Enquiry, EventRegistration, Testimonial, User
from src.domain.forms import EnquiryForm, EventRegistrationForm, TestimonialForm

router = APIRouter()


def _enquiry_input(data: dict[str, Any]) -> EnquiryInput:
    form = validate_or_400(data, EnquiryForm)
    return EnquiryInput(name=form.name, email=form.email, phone=form.phone, message=form.message)


@router.post("/business/{slug}/enquiries", response_model=BusinessEnquiry, status_code=201)
def make_business_enquiry(
    slug: str,
    data: dict[str, Any] = Depends(form_data),
    current_user: User = Depends(get_current_user),
    service: EnquiryService = Depends(get_enquiry_service),
) -> BusinessEnquiry:
    enquiry, errors = service.make_business_enquiry(current_user.id, slug, _enquiry_input(data))
    raise_for_errors(errors)
    assert enquiry is not None
    return enquiry


@router.post("/business/{slug}/testimonials", response_model=Testimonial, status_code=201)
def add_testimonial(
    slug: str,
    data: dict[str, Any] = Depends(form_data),
    current_user: User = Depends(get_current_user),
    service: BusinessService = Depends(get_business_service),
) -> Testimonial:
    form = validate_or_400(data, TestimonialForm)
    testimonial, errors = service.add_testimonial(current_user.id, slug, form.content)
    raise_for_errors(errors)
    assert testimonial is not None
    return testimonial


@router.post("/contact", response_model=MessageResponse, status_code=201)
def make_contact_enquiry(
    data: dict[str, Any] = Depends(form_data),
    service: EnquiryService = Depends(get_enquiry_service),
) -> MessageResponse:
    """Contact page message to the chamber; open to anonymous visitors."""
    service.make_contact_enquiry(_enquiry_input(data))
    return MessageResponse(message="We will be reaching you shortly!")


@router.post("/types/{type_slug}/enquiries", response_model=Enquiry, status_code=201)
def make_general_enquiry(
    type_slug: str,
    data: dict[str, Any] = Depends(form_data),
    current_user: User = Depends(get_current_user),
    service: EnquiryService = Depends(get_enquiry_service),
) -> Enquiry:
    enquiry, errors = service.make_general_enquiry(
        current_user.id, type_slug, _enquiry_input(data)
    )
    raise_for_errors(errors)
    assert enquiry is not None
    return enquiry


@router.post("/events/register", response_model=EventRegistration, status_code=201)
def register_for_event(
    data: dict[str, Any] = Depends(form_data),
    service: EventService = Depends(get_event_service),
) -> EventRegistration:
    form = validate_or_400(data, EventRegistrationForm)
    registration, errors = service.register(
        event_id=parse_uuid(form.event_id, "Event not found"),
        category_id=parse_uuid(form.category_id, "Business category not found"),
        name=form.name,
        email=form.email,
        phone=form.phone,
        business_name=form.business_name,
        location=form.location,
        is_member=form.is_member,
    )
    raise_for_errors(errors)
    assert registration is not None
    return registration


@router.get("/me/enquiries", response_model=list[BusinessEnquiry])
def my_enquiries(
    current_user: User = Depends(get_current_user),
    service: EnquiryService = Depends(get_enquiry_service),
) -> list[BusinessEnquiry]:
    return service.list_for_user(current_user.id)
