"""
Enquiries component - Business and general enquiries.
"""

from ._impl import EnquiryService
from .models import EnquiryError, EnquiryInput
from .ports import BusinessLookupPort, EnquiryRepoPort, TypeLookupPort, UserLookupPort

__all__ = [
    "EnquiryService",
    "EnquiryError",
    "EnquiryInput",
    "EnquiryRepoPort",
    "BusinessLookupPort",
    "TypeLookupPort",
    "UserLookupPort",
]
