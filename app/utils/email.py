import logging
import requests
from fastapi import Request
from app.config import Settings

logger = logging.getLogger(__name__)

BREVO_API_URL = "https://api.brevo.com/v3/smtp/email"


class EmailSender:
    """Transactional email through the Brevo HTTP API."""

    def __init__(self, settings: Settings):
        self.api_key = settings.brevo_api_key
        self.sender_email = settings.brevo_sender_email
        self.sender_name = settings.brevo_sender_name

    def send_email(self, to_name: str, to_email: str, subject: str, html_body: str) -> dict:
        if not self.api_key or not self.sender_email:
            raise RuntimeError("Brevo is not configured (BREVO_API_KEY / BREVO_SENDER_EMAIL)")

        response = requests.post(
            BREVO_API_URL,
            json={
                "sender": {"name": self.sender_name, "email": self.sender_email},
                "to": [{"email": to_email, "name": to_name}],
                "subject": subject,
                "htmlContent": html_body,
            },
            headers={
                "api-key": self.api_key,
                "Content-Type": "application/json",
            },
            timeout=10,
        )
        response.raise_for_status()
        logger.info("Email sent to %s", to_email)
        return response.json()


def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender
