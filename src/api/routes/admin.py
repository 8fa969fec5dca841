"""
Admin back office: catalog, verification, events, blog, receipts and users.

Every endpoint requires an admin session.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import (
    get_blog_service,
    get_business_service,
    get_catalog_service,
    get_enquiry_service,
    get_event_service,
    get_receipt_service,
    get_user_admin_service,
    parse_uuid,
    require_admin,
)
from src.api.errors import form_data, raise_for_errors, validate_or_400
from src.api.schemas import MessageResponse, UserResponse
from src.components.blog import BlogService
from src.components.business import BusinessService
from src.components.catalog import CatalogService
from src.components.enquiries import EnquiryService
from src.components.events import EventService
from src.components.receipts import ReceiptService
from src.components.users import DashboardStats, UserAdminService
from src.domain.entities import (
    Blog,
    Business,
    BusinessCategory,
    BusinessType,
    CategoryWithTypes,
    ContactEnquiry,
    Enquiry,
    Event,
    EventRegistration,
    Receipt,
    User,
)
from src.domain.forms import (
    AddBlogForm,
    AddCategoryForm,
    AddEventForm,
    AddEventImageForm,
    AddTypeForm,
    IdForm,
    ReceiptForm,
    UpdateUserForm,
)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=DashboardStats)
def stats(
    businesses: BusinessService = Depends(get_business_service),
    catalog: CatalogService = Depends(get_catalog_service),
    events: EventService = Depends(get_event_service),
    blogs: BlogService = Depends(get_blog_service),
) -> DashboardStats:
    return DashboardStats(
        businesses=businesses.count(),
        verified_businesses=businesses.count_verified(),
        business_types=catalog.count_types(),
        events=events.count(),
        blogs=blogs.count(),
    )


# --- Catalog ---


@router.get("/categories", response_model=list[CategoryWithTypes])
def list_categories(
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[CategoryWithTypes]:
    return catalog.list_categories_with_types()


@router.post("/categories", response_model=BusinessCategory, status_code=201)
def add_category(
    data: dict[str, Any] = Depends(form_data),
    catalog: CatalogService = Depends(get_catalog_service),
) -> BusinessCategory:
    form = validate_or_400(data, AddCategoryForm)
    category, errors = catalog.add_category(form.name)
    raise_for_errors(errors)
    assert category is not None
    return category


@router.delete("/categories/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    _, errors = catalog.delete_category(parse_uuid(category_id))
    raise_for_errors(errors)
    return MessageResponse(message="Business category deleted successfully")


@router.post("/types", response_model=BusinessType, status_code=201)
def add_type(
    data: dict[str, Any] = Depends(form_data),
    catalog: CatalogService = Depends(get_catalog_service),
) -> BusinessType:
    form = validate_or_400(data, AddTypeForm)
    business_type, errors = catalog.add_type(
        form.name, parse_uuid(form.category_id, "Business category not found")
    )
    raise_for_errors(errors)
    assert business_type is not None
    return business_type


@router.delete("/types/{type_id}", response_model=MessageResponse)
def delete_type(
    type_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    _, errors = catalog.delete_type(parse_uuid(type_id))
    raise_for_errors(errors)
    return MessageResponse(message="Business type deleted successfully")


@router.get("/types/{type_slug}/enquiries", response_model=list[Enquiry])
def list_type_enquiries(
    type_slug: str,
    catalog: CatalogService = Depends(get_catalog_service),
    enquiries: EnquiryService = Depends(get_enquiry_service),
) -> list[Enquiry]:
    business_type = catalog.get_type_by_slug(type_slug)
    if business_type is None:
        raise HTTPException(status_code=404, detail="Business type not found")
    return enquiries.list_general_for_type(business_type.id)


# --- Contact enquiries ---


@router.get("/enquiries", response_model=list[ContactEnquiry])
def list_contact_enquiries(
    enquiries: EnquiryService = Depends(get_enquiry_service),
) -> list[ContactEnquiry]:
    return enquiries.list_contacts()


@router.post("/enquiries/resolve", response_model=MessageResponse)
def toggle_contact_resolved(
    data: dict[str, Any] = Depends(form_data),
    enquiries: EnquiryService = Depends(get_enquiry_service),
) -> MessageResponse:
    form = validate_or_400(data, IdForm)
    contact, errors = enquiries.toggle_contact_resolved(parse_uuid(form.id, "Contact not found"))
    raise_for_errors(errors)
    assert contact is not None
    if contact.is_resolved:
        return MessageResponse(message="Contact marked as resolved")
    return MessageResponse(message="Contact marked as unresolved")


# --- Verification ---


@router.get("/businesses", response_model=list[Business])
def list_businesses(
    businesses: BusinessService = Depends(get_business_service),
) -> list[Business]:
    return businesses.list_all()


@router.post("/businesses/verify", response_model=Business)
def toggle_verification(
    data: dict[str, Any] = Depends(form_data),
    businesses: BusinessService = Depends(get_business_service),
) -> Business:
    form = validate_or_400(data, IdForm)
    business, errors = businesses.toggle_verification(parse_uuid(form.id))
    raise_for_errors(errors)
    assert business is not None
    return business


# --- Events ---


@router.get("/events", response_model=list[Event])
def list_events(events: EventService = Depends(get_event_service)) -> list[Event]:
    return events.list_all()


@router.post("/events", response_model=Event, status_code=201)
def create_event(
    data: dict[str, Any] = Depends(form_data),
    events: EventService = Depends(get_event_service),
) -> Event:
    form = validate_or_400(data, AddEventForm)
    event, errors = events.create_event(form.title, form.description, form.date)
    raise_for_errors(errors)
    assert event is not None
    return event


@router.post("/events/{event_id}", response_model=Event)
def update_event(
    event_id: str,
    data: dict[str, Any] = Depends(form_data),
    events: EventService = Depends(get_event_service),
) -> Event:
    form = validate_or_400(data, AddEventForm)
    event, errors = events.update_event(
        parse_uuid(event_id), form.title, form.description, form.date
    )
    raise_for_errors(errors)
    assert event is not None
    return event


@router.post("/events/{event_id}/toggle", response_model=Event)
def toggle_event_completion(
    event_id: str,
    events: EventService = Depends(get_event_service),
) -> Event:
    event, errors = events.toggle_completion(parse_uuid(event_id))
    raise_for_errors(errors)
    assert event is not None
    return event


@router.post("/events-images", response_model=Event)
def add_event_image(
    data: dict[str, Any] = Depends(form_data),
    events: EventService = Depends(get_event_service),
) -> Event:
    form = validate_or_400(data, AddEventImageForm)
    event, errors = events.add_image(parse_uuid(form.id), form.image, form.description)
    raise_for_errors(errors)
    assert event is not None
    return event


@router.delete("/events/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: str,
    events: EventService = Depends(get_event_service),
) -> MessageResponse:
    _, errors = events.delete(parse_uuid(event_id))
    raise_for_errors(errors)
    return MessageResponse(message="Event deleted successfully")


@router.get("/events/{event_id}/registrations", response_model=list[EventRegistration])
def list_registrations(
    event_id: str,
    events: EventService = Depends(get_event_service),
) -> list[EventRegistration]:
    return events.registrations(parse_uuid(event_id))


# --- Blog ---


@router.post("/blogs", response_model=Blog, status_code=201)
def create_blog(
    data: dict[str, Any] = Depends(form_data),
    blogs: BlogService = Depends(get_blog_service),
) -> Blog:
    form = validate_or_400(data, AddBlogForm)
    return blogs.create(form.title, form.description, form.content, form.image)


@router.post("/blogs/{blog_id}", response_model=Blog)
def update_blog(
    blog_id: str,
    data: dict[str, Any] = Depends(form_data),
    blogs: BlogService = Depends(get_blog_service),
) -> Blog:
    form = validate_or_400(data, AddBlogForm)
    blog, errors = blogs.update(
        parse_uuid(blog_id), form.title, form.description, form.content, form.image
    )
    raise_for_errors(errors)
    assert blog is not None
    return blog


@router.delete("/blogs/{blog_id}", response_model=MessageResponse)
def delete_blog(
    blog_id: str,
    blogs: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    _, errors = blogs.delete(parse_uuid(blog_id))
    raise_for_errors(errors)
    return MessageResponse(message="Blog deleted successfully")


# --- Receipts ---


@router.get("/receipts", response_model=list[Receipt])
def list_receipts(receipts: ReceiptService = Depends(get_receipt_service)) -> list[Receipt]:
    return receipts.list_receipts()


@router.post("/receipts", response_model=Receipt, status_code=201)
def create_receipt(
    data: dict[str, Any] = Depends(form_data),
    receipts: ReceiptService = Depends(get_receipt_service),
) -> Receipt:
    form = validate_or_400(data, ReceiptForm)
    return receipts.create_receipt(
        name=form.name,
        phone=form.phone,
        wing=form.wing,
        date=form.date,
        amount=form.amount,
        address=form.address,
    )


# --- Users ---


@router.get("/users", response_model=list[UserResponse])
def list_users(
    users: UserAdminService = Depends(get_user_admin_service),
) -> list[UserResponse]:
    return [UserResponse.from_user(u) for u in users.list_users()]


@router.post("/users", response_model=UserResponse)
def update_user(
    data: dict[str, Any] = Depends(form_data),
    users: UserAdminService = Depends(get_user_admin_service),
) -> UserResponse:
    form = validate_or_400(data, UpdateUserForm)
    user, errors = users.update_user(parse_uuid(form.id), form.name, form.email, form.type)
    raise_for_errors(errors)
    assert user is not None
    return UserResponse.from_user(user)


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    admin: User = Depends(require_admin),
    users: UserAdminService = Depends(get_user_admin_service),
) -> MessageResponse:
    _, errors = users.delete_user(admin.id, parse_uuid(user_id))
    raise_for_errors(errors)
    return MessageResponse(message="User deleted successfully")
