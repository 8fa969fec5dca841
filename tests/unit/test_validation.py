"""
Tests for typed form validation (Ok / Invalid) and the page forms.
"""

from __future__ import annotations

from datetime import date

from src.domain.forms import (
    AddBlogForm,
    BusinessForm,
    EnquiryForm,
    EventRegistrationForm,
    ReceiptForm,
    ResetPasswordForm,
    SignInForm,
    SignUpForm,
)
from src.domain.validation import Invalid, Ok, validate


def business_data(**overrides) -> dict[str, str]:
    data = {
        "name": "Acme Mart",
        "tagline": "Fresh every day",
        "about": "Neighbourhood grocery",
        "instagram": "https://instagram.com/acme",
        "whats_app": "9876543210",
        "email": "acme@example.com",
        "phone": "9876543210",
        "category_id": "11111111-1111-1111-1111-111111111111",
        "type_id": "22222222-2222-2222-2222-222222222222",
        "logo": "",
        "location": "",
    }
    data.update(overrides)
    return data


class TestValidate:
    def test_ok(self) -> None:
        result = validate({"email": "a@b.co", "password": "secret"}, SignInForm)
        assert isinstance(result, Ok)
        assert result.success is True
        assert result.data.email == "a@b.co"

    def test_invalid_collects_first_message_per_field(self) -> None:
        result = validate({"email": "nope", "password": ""}, SignInForm)
        assert isinstance(result, Invalid)
        assert result.success is False
        assert result.field_errors == {
            "email": "Please enter a valid email address",
            "password": "Password is required",
        }

    def test_missing_field_uses_label(self) -> None:
        result = validate({}, ReceiptForm)
        assert isinstance(result, Invalid)
        assert result.field_errors["name"] == "Name is required"
        assert result.field_errors["date"] == "Date is required"

    def test_missing_field_uses_title(self) -> None:
        data = business_data()
        del data["whats_app"]
        result = validate(data, BusinessForm)
        assert isinstance(result, Invalid)
        assert result.field_errors == {"whats_app": "WhatsApp is required"}


class TestForms:
    def test_sign_up_defaults_to_user(self) -> None:
        result = validate(
            {"name": "Jane", "email": "jane@example.com", "password": "longenough"}, SignUpForm
        )
        assert isinstance(result, Ok)
        assert result.data.type == "USER"

    def test_sign_up_short_password(self) -> None:
        result = validate(
            {"name": "Jane", "email": "jane@example.com", "password": "short"}, SignUpForm
        )
        assert isinstance(result, Invalid)
        assert result.field_errors == {"password": "Password must be at least 8 characters"}

    def test_reset_password_must_match(self) -> None:
        result = validate(
            {"password": "longenough", "confirm_password": "different"}, ResetPasswordForm
        )
        assert isinstance(result, Invalid)
        assert result.field_errors == {"confirm_password": "Passwords do not match"}

    def test_business_blank_optionals_become_none(self) -> None:
        result = validate(business_data(), BusinessForm)
        assert isinstance(result, Ok)
        assert result.data.logo is None
        assert result.data.location is None

    def test_business_instagram_must_be_instagram(self) -> None:
        result = validate(business_data(instagram="https://example.com/acme"), BusinessForm)
        assert isinstance(result, Invalid)
        assert result.field_errors["instagram"] == "Please enter a valid Instagram URL"

    def test_business_phone_length(self) -> None:
        result = validate(business_data(phone="12345"), BusinessForm)
        assert isinstance(result, Invalid)
        assert result.field_errors["phone"] == "Enter a valid Phone number"

    def test_short_location_rejected(self) -> None:
        result = validate(business_data(location="ab"), BusinessForm)
        assert isinstance(result, Invalid)
        assert result.field_errors["location"] == "Location must be at least 3 characters"

    def test_enquiry(self) -> None:
        result = validate(
            {
                "name": "Jane",
                "email": "jane@example.com",
                "phone": "9876543210",
                "message": "Hi",
            },
            EnquiryForm,
        )
        assert isinstance(result, Invalid)
        assert result.field_errors == {"message": "Message must be at least 5 characters"}

    def test_event_registration_checkbox(self) -> None:
        data = {
            "event_id": "e1",
            "category_id": "c1",
            "name": "Jane",
            "email": "jane@example.com",
            "phone": "9876543210",
            "business_name": "Acme",
            "location": "Town",
            "is_member": "on",
        }
        result = validate(data, EventRegistrationForm)
        assert isinstance(result, Ok)
        assert result.data.is_member is True

    def test_blog_content_length(self) -> None:
        data = {
            "title": "News",
            "description": "Short news",
            "content": "Too short",
            "image": "/uploads/blogs/x.png",
        }
        result = validate(data, AddBlogForm)
        assert isinstance(result, Invalid)
        assert result.field_errors == {"content": "Content must be at least 50 characters"}

    def test_receipt_amount_positive(self) -> None:
        data = {
            "name": "Donor",
            "phone": "9876543210",
            "wing": "A",
            "date": "2024-01-05",
            "amount": "0",
            "address": "1 Main Street",
        }
        result = validate(data, ReceiptForm)
        assert isinstance(result, Invalid)
        assert result.field_errors == {"amount": "Amount must be greater than 0"}

        ok = validate({**data, "amount": "500"}, ReceiptForm)
        assert isinstance(ok, Ok)
        assert ok.data.amount == 500
        assert ok.data.date == date(2024, 1, 5)
