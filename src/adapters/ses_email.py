"""Amazon SES email adapter."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.ports.email import EmailAddress, EmailResult

logger = logging.getLogger(__name__)


class SESEmailAdapter:
    """Sends HTML email through SES; failures become FAILED results."""

    def __init__(
        self,
        default_sender: EmailAddress,
        region: str | None = None,
        client: Any | None = None,
    ):
        self.default_sender = default_sender
        self._client = client if client is not None else boto3.client("ses", region_name=region)

    def send_email(
        self,
        recipient: str,
        subject: str,
        body_html: str,
        sender: EmailAddress | None = None,
    ) -> EmailResult:
        source = str(sender or self.default_sender)
        try:
            response = self._client.send_email(
                Source=source,
                Destination={"ToAddresses": [recipient]},
                Message={
                    "Subject": {"Charset": "UTF-8", "Data": subject},
                    "Body": {"Html": {"Charset": "UTF-8", "Data": body_html}},
                },
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to send email to %s: %s", recipient, e)
            return EmailResult.failed(recipient, str(e))

        message_id = response.get("MessageId")
        logger.info("Email sent to %s (MessageId=%s)", recipient, message_id)
        return EmailResult.success(recipient, message_id=message_id)
