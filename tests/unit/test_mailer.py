"""
Templated email through the dev adapter, plus the SES adapter's error mapping.
"""

from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from src.adapters.ses_email import SESEmailAdapter
from src.core.ports.email import EmailAddress, EmailStatus, EmailTemplateError
from src.core.services.mailer import EmailTemplates, Mailer


class TestEmailTemplates:
    @pytest.fixture
    def templates(self) -> EmailTemplates:
        return EmailTemplates(site_name="Test Chamber", base_url="http://testserver/")

    def test_renders_with_site_context(self, templates) -> None:
        html = templates.render("business-verified", {"name": "Ann", "business_name": "Acme"})
        assert "Ann" in html
        assert "Acme" in html
        assert "Test Chamber" in html

    def test_escapes_user_content(self, templates) -> None:
        html = templates.render("business-enquiry", {"name": "Ann", "enquiry": "<script>x</script>"})
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_reset_link(self, templates) -> None:
        html = templates.render(
            "reset-password",
            {"name": "Ann", "reset_url": "http://testserver/reset-password?token=abc", "ttl_minutes": 30},
        )
        assert "http://testserver/reset-password?token=abc" in html
        assert "30" in html

    def test_unknown_template(self, templates) -> None:
        with pytest.raises(EmailTemplateError):
            templates.render("newsletter", {})


class TestMailer:
    def test_dev_send_returns_202(self, mailer, dev_email) -> None:
        status = mailer.send_template(
            "sign-up-business", {"name": "Bob"}, "bob@example.com", "Welcome! List your business"
        )
        assert status == 202
        sent = dev_email.get_last_email()
        assert sent.recipient == "bob@example.com"
        assert sent.subject == "Welcome! List your business"
        assert sent.sender == '"Test Chamber" <no-reply@example.com>'
        assert "Bob" in sent.body_html

    def test_render_failure_returns_500(self, mailer, dev_email) -> None:
        assert mailer.send_template("missing", {}, "x@example.com", "Subject") == 500
        assert dev_email.email_count == 0

    def test_port_failure_passes_status(self, mailer) -> None:
        port = Mock()
        port.send_email.return_value = Mock(status_code=500, error="boom")
        failing = Mailer(port=port, templates=mailer._templates, sender=mailer._sender)
        assert failing.send_template("sign-up-business", {"name": "Bob"}, "b@x.co", "Hi") == 500


class TestSESEmailAdapter:
    def test_success(self) -> None:
        client = Mock()
        client.send_email.return_value = {"MessageId": "abc"}
        adapter = SESEmailAdapter(default_sender=EmailAddress("no-reply@example.com"), client=client)

        result = adapter.send_email("to@example.com", "Subject", "<p>Hi</p>")

        assert result.status == EmailStatus.SENT
        assert result.status_code == 200
        kwargs = client.send_email.call_args.kwargs
        assert kwargs["Destination"] == {"ToAddresses": ["to@example.com"]}

    def test_client_error_is_failure(self) -> None:
        client = Mock()
        client.send_email.side_effect = ClientError(
            {"Error": {"Code": "MessageRejected", "Message": "Rejected"}}, "SendEmail"
        )
        adapter = SESEmailAdapter(default_sender=EmailAddress("no-reply@example.com"), client=client)

        result = adapter.send_email("to@example.com", "Subject", "<p>Hi</p>")

        assert result.status == EmailStatus.FAILED
        assert result.status_code == 500
