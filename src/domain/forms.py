"""
Form schemas for every page action.

Used with ``src.domain.validation.validate``; field names match the HTML
input names.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.domain.validation import (
    BlankToNone,
    email_address,
    exact_length,
    min_length,
    positive,
    url_containing,
)

# --- Shared field types ---

Id = Annotated[str, min_length(1, "ID is required")]
Name = Annotated[str, min_length(3, "Name must be at least 3 characters")]
Email = Annotated[str, email_address()]
Phone = Annotated[str, exact_length(10, "Enter a valid Phone number")]
Title = Annotated[str, min_length(3, "Title must be at least 3 characters")]
Description = Annotated[str, min_length(5, "Description must be at least 5 characters")]
OptionalText = Annotated[str | None, BlankToNone]


# --- Auth ---


class SignUpForm(BaseModel):
    name: Name
    email: Email
    password: Annotated[str, min_length(8, "Password must be at least 8 characters")]
    type: Literal["USER", "BUSINESS"] = "USER"


class SignInForm(BaseModel):
    email: Email
    password: Annotated[str, min_length(3, "Password is required")]


class ForgotPasswordForm(BaseModel):
    email: Email


class ResetPasswordForm(BaseModel):
    password: Annotated[str, min_length(8, "Password must be at least 8 characters")]
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        if value != info.data.get("password"):
            raise ValueError("Passwords do not match")
        return value


# --- Businesses ---


class BusinessUpdateForm(BaseModel):
    name: Name
    tagline: Annotated[str, min_length(5, "Tagline must be at least 5 characters")]
    about: Annotated[str, min_length(5, "About must be at least 5 characters")]
    logo: OptionalText = None
    cover_image: OptionalText = None
    location: Annotated[
        str | None, BlankToNone, min_length(3, "Location must be at least 3 characters")
    ] = None
    instagram: Annotated[
        str,
        min_length(3, "Instagram must be at least 3 characters"),
        url_containing("instagram.com", "Please enter a valid Instagram URL"),
    ]
    whats_app: Annotated[str, exact_length(10, "Enter a valid WhatsApp number")] = Field(
        title="WhatsApp"
    )
    facebook: OptionalText = None
    linked_in: OptionalText = None
    email: Email
    phone: Phone


class BusinessForm(BusinessUpdateForm):
    category_id: Annotated[str, min_length(3, "Select a business category")] = Field(
        title="Category"
    )
    type_id: Annotated[str, min_length(3, "Select a business type")] = Field(title="Type")


class IdForm(BaseModel):
    id: Id = Field(title="ID")


class AddImageForm(BaseModel):
    url: Annotated[str, min_length(1, "Image is required")] = Field(title="Image")
    description: str = ""


class AddServiceForm(BaseModel):
    title: Title
    description: Description
    image: OptionalText = None


class EditServiceForm(AddServiceForm):
    id: Id = Field(title="ID")


class TestimonialForm(BaseModel):
    content: Annotated[str, min_length(10, "Testimonial must be at least 10 characters")]


# --- Catalog ---


class AddCategoryForm(BaseModel):
    name: Name


class AddTypeForm(BaseModel):
    category_id: Annotated[str, min_length(1, "Select a business category")] = Field(
        title="Category"
    )
    name: Name


# --- Enquiries ---


class EnquiryForm(BaseModel):
    name: Name
    email: Email
    phone: Phone
    message: Annotated[str, min_length(5, "Message must be at least 5 characters")]


# --- Events & Blog ---


class AddEventForm(BaseModel):
    title: Title
    description: Description
    date: datetime


class AddEventImageForm(BaseModel):
    id: Id = Field(title="ID")
    image: Annotated[str, min_length(1, "Image is required")]
    description: str = ""


class EventRegistrationForm(BaseModel):
    event_id: Id = Field(title="Event")
    category_id: Annotated[str, min_length(1, "Select a business category")] = Field(
        title="Category"
    )
    name: Name
    email: Email
    phone: Phone
    business_name: Annotated[str, min_length(3, "Business name must be at least 3 characters")]
    is_member: bool = False
    location: Annotated[str, min_length(3, "Location must be at least 3 characters")]


class AddBlogForm(BaseModel):
    title: Title
    description: Description
    content: Annotated[str, min_length(50, "Content must be at least 50 characters")]
    image: Annotated[str, min_length(3, "Image is required")]


# --- Back office ---


class ReceiptForm(BaseModel):
    name: Name
    phone: Phone
    wing: Annotated[str, min_length(1, "Wing is required")]
    date: date
    amount: Annotated[int, positive("Amount must be greater than 0")]
    address: Annotated[str, min_length(5, "Address must be at least 5 characters")]


class UpdateUserForm(BaseModel):
    id: Id = Field(title="ID")
    name: Name
    email: Email
    type: Literal["USER", "BUSINESS", "ADMIN"]
