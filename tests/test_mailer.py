"""
Tests for the Brevo mail client.
"""
import pytest
import requests
from unittest.mock import patch, MagicMock

from admin_portal.config import Settings
from admin_portal.services.exceptions import MailDeliveryError
from admin_portal.services.mailer import BREVO_SEND_URL, INVITE_SUBJECT, Mailer


def configured_mailer():
    return Mailer(Settings(brevo_email="noreply@example.com", brevo_api_key="brevo-key"))


class TestMailer:
    """Test payload construction and error translation."""

    def test_send_invite_posts_to_brevo(self):
        """The invite goes out as one JSON request with the api-key header."""
        mailer = configured_mailer()
        with patch("admin_portal.services.mailer.requests.post") as post:
            post.return_value = MagicMock(status_code=201, text="")
            mailer.send_invite("new@example.com", "http://localhost:3000/auth/reset-password/abc")

        post.assert_called_once()
        args, kwargs = post.call_args
        assert args[0] == BREVO_SEND_URL
        assert kwargs["headers"]["api-key"] == "brevo-key"
        assert kwargs["timeout"] == 10

        payload = kwargs["json"]
        assert payload["to"] == [{"email": "new@example.com"}]
        assert payload["sender"]["email"] == "noreply@example.com"
        assert payload["subject"] == INVITE_SUBJECT
        assert "http://localhost:3000/auth/reset-password/abc" in payload["htmlContent"]

    def test_unconfigured_transport(self):
        mailer = Mailer(Settings(brevo_email="", brevo_api_key=""))
        with patch("admin_portal.services.mailer.requests.post") as post:
            with pytest.raises(MailDeliveryError):
                mailer.send("a@example.com", "Hi", "<p>Hi</p>")
        post.assert_not_called()

    def test_rejected_by_api(self):
        mailer = configured_mailer()
        with patch("admin_portal.services.mailer.requests.post") as post:
            post.return_value = MagicMock(status_code=401, text="unauthorized")
            with pytest.raises(MailDeliveryError):
                mailer.send("a@example.com", "Hi", "<p>Hi</p>")

    def test_transport_unreachable(self):
        mailer = configured_mailer()
        with patch("admin_portal.services.mailer.requests.post") as post:
            post.side_effect = requests.ConnectionError("down")
            with pytest.raises(MailDeliveryError) as exc_info:
                mailer.send("a@example.com", "Hi", "<p>Hi</p>")
        assert exc_info.value.status_code == 500
