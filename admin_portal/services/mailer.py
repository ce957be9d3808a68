"""
Outbound email through the Brevo transactional API.
"""
from functools import lru_cache

import requests

from ..config import Settings, get_settings
from ..logging_config import mail_logger
from .exceptions import MailDeliveryError

BREVO_SEND_URL = "https://api.brevo.com/v3/smtp/email"
SEND_TIMEOUT_SECONDS = 10

INVITE_SUBJECT = "You're invited - set your password"


def build_invite_html(link: str) -> str:
    return (
        "<p>Welcome! Click the link below to set your password:</p>\n"
        f'<a href="{link}">{link}</a>'
    )


class Mailer:
    """Sends transactional email. Raises MailDeliveryError on any failure."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def is_configured(self) -> bool:
        return bool(self.settings.brevo_api_key and self.settings.brevo_email)

    def send(self, to: str, subject: str, html: str) -> None:
        if not self.is_configured():
            raise MailDeliveryError("Email transport is not configured")

        payload = {
            "sender": {"name": self.settings.mail_sender_name, "email": self.settings.brevo_email},
            "to": [{"email": to}],
            "subject": subject,
            "htmlContent": html,
        }
        headers = {
            "api-key": self.settings.brevo_api_key,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(BREVO_SEND_URL, json=payload, headers=headers, timeout=SEND_TIMEOUT_SECONDS)
        except requests.RequestException as e:
            mail_logger.error("Email transport unreachable", error=e, to=to)
            raise MailDeliveryError()

        if response.status_code >= 300:
            mail_logger.warning("Email rejected", to=to, status_code=response.status_code, body=response.text[:500])
            raise MailDeliveryError()

        mail_logger.info("Email sent", to=to, subject=subject)

    def send_invite(self, to: str, link: str) -> None:
        self.send(to, INVITE_SUBJECT, build_invite_html(link))


@lru_cache()
def get_mailer() -> Mailer:
    return Mailer(get_settings())
