from datetime import date, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
UserType = Literal["USER", "BUSINESS", "ADMIN"]

# --- User & Auth ---

class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    name: str
    password_hash: str
    type: UserType = "USER"
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

class Session(BaseModel):
    id: str  # Token or Session ID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    created_at: datetime = Field(default_factory=datetime.utcnow)

class ResetRequest(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    token: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

# --- Directory ---

class BusinessCategory(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    slug: str

class BusinessType(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    slug: str
    category_id: UUID

class CategoryWithTypes(BusinessCategory):
    types: list[BusinessType] = Field(default_factory=list)

class GalleryImage(BaseModel):
    url: str
    description: str = ""

class Business(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    slug: str
    tagline: str
    about: str
    logo: str | None = None
    cover_image: str | None = None
    location: str | None = None
    instagram: str | None = None
    whats_app: str | None = None
    facebook: str | None = None
    linked_in: str | None = None
    email: str
    phone: str
    is_verified: bool = False

    owner_id: UUID
    type_id: UUID

    gallery: list[GalleryImage] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

class Service(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    business_id: UUID
    title: str
    description: str
    image: str | None = None

class Testimonial(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    business_id: UUID
    author_business_id: UUID
    content: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

# --- Enquiries ---

class BusinessEnquiry(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    business_id: UUID
    user_id: UUID
    name: str
    email: str
    phone: str
    message: str
    is_resolved: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)

class Enquiry(BaseModel):
    """General enquiry addressed to every business of a type."""

    id: UUID = Field(default_factory=uuid4)
    business_type_id: UUID
    user_id: UUID
    name: str
    email: str
    phone: str
    message: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

class ContactEnquiry(BaseModel):
    """Message to the chamber itself from the contact page; no account needed."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    email: str
    phone: str
    message: str
    is_resolved: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)

# --- Events & Blog ---

class EventImage(BaseModel):
    url: str
    description: str = ""

class Event(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    title: str
    slug: str
    description: str
    date: datetime
    is_completed: bool = False
    images: list[EventImage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)

class EventRegistration(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    event_id: UUID
    category_id: UUID
    name: str
    email: str
    phone: str
    business_name: str
    is_member: bool = False
    location: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

class Blog(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    title: str
    description: str
    content: str
    image: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

# --- Back office ---

class Receipt(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    receipt_number: str
    name: str
    phone: str
    wing: str
    date: date
    amount: int
    address: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
