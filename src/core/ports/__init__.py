# Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.email import (
    EmailAddress,
    EmailPort,
    EmailResult,
    EmailStatus,
    EmailTemplateError,
    MailerPort,
)
from src.core.ports.storage import UploadStorePort

__all__ = [
    # Email
    "EmailAddress",
    "EmailPort",
    "EmailResult",
    "EmailStatus",
    "EmailTemplateError",
    "MailerPort",
    # Storage
    "UploadStorePort",
]
