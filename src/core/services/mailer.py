"""
Templated transactional email.

``Mailer.send_template`` renders a Jinja2 template from
``src/templates/email`` and hands the HTML to an EmailPort adapter. It
returns a status code (200 sent, 202 logged in dev, 500 failed) and never
raises, so callers can treat email as best-effort.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from src.core.ports.email import EmailAddress, EmailPort, EmailTemplateError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates" / "email"

TEMPLATE_NAMES = frozenset(
    {
        "business-enquiry",
        "business-verified",
        "event-registration",
        "sign-up-business",
        "reset-password",
    }
)


class EmailTemplates:
    """Jinja2 environment for email bodies with site-wide context."""

    def __init__(
        self,
        site_name: str,
        base_url: str,
        templates_dir: Path = TEMPLATES_DIR,
    ) -> None:
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(enabled_extensions=["html"]),
        )
        self._globals = {"site_name": site_name, "base_url": base_url.rstrip("/")}

    def render(self, template: str, data: dict[str, Any]) -> str:
        if template not in TEMPLATE_NAMES:
            raise EmailTemplateError(template, "unknown template")
        context = {**self._globals, "year": datetime.now().year, **data}
        try:
            return self._env.get_template(f"{template}.html").render(**context)
        except TemplateError as e:
            raise EmailTemplateError(template, str(e)) from e


class Mailer:
    def __init__(
        self,
        port: EmailPort,
        templates: EmailTemplates,
        sender: EmailAddress,
    ) -> None:
        self._port = port
        self._templates = templates
        self._sender = sender

    def send_template(
        self,
        template: str,
        data: dict[str, Any],
        recipient: str,
        subject: str,
    ) -> int:
        try:
            body_html = self._templates.render(template, data)
        except EmailTemplateError as e:
            logger.error("Failed to render email: %s", e)
            return 500

        result = self._port.send_email(
            recipient=recipient,
            subject=subject,
            body_html=body_html,
            sender=self._sender,
        )
        if result.error and result.status_code >= 500:
            logger.error("Failed to send '%s' email to %s: %s", template, recipient, result.error)
        return result.status_code
