"""
Email adapter for development and tests.

Nothing leaves the process: each message is logged with a short body preview
and kept in ``outbox`` so tests can assert on what would have been sent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import uuid4

from src.core.ports.email import EmailAddress, EmailResult

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 100


@dataclass(frozen=True)
class SentEmail:
    id: str
    recipient: str
    subject: str
    body_html: str
    sender: str | None


@dataclass
class DevEmailAdapter:
    outbox: list[SentEmail] = field(default_factory=list)

    def send_email(
        self,
        recipient: str,
        subject: str,
        body_html: str,
        sender: EmailAddress | None = None,
    ) -> EmailResult:
        email = SentEmail(
            id=f"dev-{uuid4().hex[:12]}",
            recipient=recipient,
            subject=subject,
            body_html=body_html,
            sender=str(sender) if sender else None,
        )
        self.outbox.append(email)

        preview = body_html[:PREVIEW_CHARS]
        if len(body_html) > PREVIEW_CHARS:
            preview += "..."
        logger.info(
            "EMAIL (dev) %s to=%s from=%s subject=%r body=%r",
            email.id,
            recipient,
            email.sender,
            subject,
            preview,
        )
        return EmailResult.logged(recipient, message_id=email.id)

    def get_last_email(self) -> SentEmail | None:
        return self.outbox[-1] if self.outbox else None

    @property
    def email_count(self) -> int:
        return len(self.outbox)
