"""
Transactional email ports.

``EmailPort`` is the provider boundary (dev log or Amazon SES); ``MailerPort``
is what components call: it renders a named template and reports the outcome
as an HTTP-style status code. Neither raises on delivery problems.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class EmailStatus(Enum):
    SENT = "sent"
    LOGGED = "logged"  # dev adapter
    FAILED = "failed"


STATUS_CODES = {
    EmailStatus.SENT: 200,
    EmailStatus.LOGGED: 202,
    EmailStatus.FAILED: 500,
}


@dataclass(frozen=True)
class EmailAddress:
    """Mailbox with an optional display name, e.g. ``"Chamber" <no-reply@x.org>``."""

    email: str
    name: str | None = None

    def __str__(self) -> str:
        if not self.name:
            return self.email
        quoted = self.name.replace('"', '\\"')
        return f'"{quoted}" <{self.email}>'


@dataclass(frozen=True)
class EmailResult:
    recipient: str
    status: EmailStatus
    message_id: str | None = None
    error: str | None = None

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.status]

    @classmethod
    def success(cls, recipient: str, message_id: str | None = None) -> EmailResult:
        return cls(recipient, EmailStatus.SENT, message_id=message_id)

    @classmethod
    def logged(cls, recipient: str, message_id: str) -> EmailResult:
        return cls(recipient, EmailStatus.LOGGED, message_id=message_id)

    @classmethod
    def failed(cls, recipient: str, error: str) -> EmailResult:
        return cls(recipient, EmailStatus.FAILED, error=error)


class EmailPort(Protocol):
    def send_email(
        self,
        recipient: str,
        subject: str,
        body_html: str,
        sender: EmailAddress | None = None,
    ) -> EmailResult:
        """Deliver one HTML message; ``sender`` falls back to the adapter default."""
        ...


class EmailTemplateError(Exception):
    """Unknown template, or one that failed to render."""

    def __init__(self, template: str, error: str) -> None:
        self.template = template
        super().__init__(f"Email template '{template}' failed: {error}")


class MailerPort(Protocol):
    def send_template(
        self,
        template: str,
        data: dict[str, Any],
        recipient: str,
        subject: str,
    ) -> int:
        """Render and send. Returns 200, 202 (dev) or 500."""
        ...
