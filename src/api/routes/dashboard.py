"""
Business owner dashboard: onboarding, profile, gallery, services, enquiries.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import (
    get_business_service,
    get_enquiry_service,
    parse_uuid,
    require_business_owner,
)
from src.api.errors import form_data, raise_for_errors, validate_or_400
from src.api.schemas import MessageResponse
from src.components.business import BUSINESS_NOT_FOUND, BusinessService
from src.components.enquiries import EnquiryService
from src.domain.entities import Business, BusinessEnquiry, Service, User
from src.domain.forms import (
    AddImageForm,
    AddServiceForm,
    BusinessForm,
    EditServiceForm,
    IdForm,
)

router = APIRouter()


def _own_business(service: BusinessService, owner: User) -> Business:
    business = service.get_by_owner(owner.id)
    if business is None:
        raise HTTPException(status_code=404, detail=BUSINESS_NOT_FOUND.message)
    return business


@router.get("")
def dashboard_home(
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> dict[str, Any]:
    """Owner's business with its services; ``business`` is None before onboarding."""
    business = service.get_by_owner(owner.id)
    return {
        "business": business,
        "services": service.list_services(business.id) if business else [],
        "onboarding": business is None,
    }


@router.post("/onboarding", response_model=Business, status_code=201)
def onboard(
    data: dict[str, Any] = Depends(form_data),
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> Business:
    form = validate_or_400(data, BusinessForm)
    business, errors = service.onboard(owner, form)
    raise_for_errors(errors)
    assert business is not None
    return business


@router.post("/edit", response_model=Business)
def edit_business(
    data: dict[str, Any] = Depends(form_data),
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> Business:
    form = validate_or_400(data, BusinessForm)
    business, errors = service.update(owner.id, form)
    raise_for_errors(errors)
    assert business is not None
    return business


@router.post("/gallery", response_model=Business)
def add_gallery_image(
    data: dict[str, Any] = Depends(form_data),
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> Business:
    form = validate_or_400(data, AddImageForm)
    business, errors = service.add_gallery_image(owner.id, form.url, form.description)
    raise_for_errors(errors)
    assert business is not None
    return business


# --- Services ---


@router.get("/services", response_model=list[Service])
def list_services(
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> list[Service]:
    return service.list_services(_own_business(service, owner).id)


@router.post("/services", response_model=Service, status_code=201)
def create_service(
    data: dict[str, Any] = Depends(form_data),
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> Service:
    form = validate_or_400(data, AddServiceForm)
    created, errors = service.create_service(owner.id, form.title, form.description, form.image)
    raise_for_errors(errors)
    assert created is not None
    return created


@router.post("/services/edit", response_model=Service)
def update_service(
    data: dict[str, Any] = Depends(form_data),
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> Service:
    form = validate_or_400(data, EditServiceForm)
    updated, errors = service.update_service(
        owner.id, parse_uuid(form.id), form.title, form.description, form.image
    )
    raise_for_errors(errors)
    assert updated is not None
    return updated


@router.post("/services/delete", response_model=MessageResponse)
def delete_service(
    data: dict[str, Any] = Depends(form_data),
    owner: User = Depends(require_business_owner),
    service: BusinessService = Depends(get_business_service),
) -> MessageResponse:
    form = validate_or_400(data, IdForm)
    _, errors = service.delete_service(owner.id, parse_uuid(form.id))
    raise_for_errors(errors)
    return MessageResponse(message="Service deleted successfully")


# --- Enquiries ---


@router.get("/enquiries")
def list_enquiries(
    owner: User = Depends(require_business_owner),
    businesses: BusinessService = Depends(get_business_service),
    enquiries: EnquiryService = Depends(get_enquiry_service),
) -> dict[str, Any]:
    business = _own_business(businesses, owner)
    return {
        "business_enquiries": enquiries.list_for_business(business.id),
        "general_enquiries": enquiries.list_general_for_type(business.type_id),
    }


@router.post("/enquiries/resolve", response_model=BusinessEnquiry)
def toggle_enquiry_resolved(
    data: dict[str, Any] = Depends(form_data),
    owner: User = Depends(require_business_owner),
    enquiries: EnquiryService = Depends(get_enquiry_service),
) -> BusinessEnquiry:
    form = validate_or_400(data, IdForm)
    enquiry, errors = enquiries.toggle_resolved(parse_uuid(form.id), owner_id=owner.id)
    raise_for_errors(errors)
    assert enquiry is not None
    return enquiry
