"""
Business component - Member business profiles, services and testimonials.
"""

from ._impl import BusinessService
from .models import BUSINESS_NOT_FOUND, PROFILE_FIELDS, BusinessError
from .ports import (
    BusinessRepoPort,
    ServiceRepoPort,
    TestimonialRepoPort,
    TypeLookupPort,
    UserLookupPort,
)

__all__ = [
    "BusinessService",
    "BusinessError",
    "BUSINESS_NOT_FOUND",
    "PROFILE_FIELDS",
    # Ports
    "BusinessRepoPort",
    "ServiceRepoPort",
    "TestimonialRepoPort",
    "TypeLookupPort",
    "UserLookupPort",
]
