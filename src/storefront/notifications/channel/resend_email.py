"""Email adapter backed by the Resend API."""

import resend
import structlog

from storefront.notifications.channel.email_port import EmailPort

logger = structlog.get_logger(__name__)


class ResendEmailAdapter(EmailPort):
    def __init__(self, api_key: str, sender: str):
        resend.api_key = api_key
        self.sender = sender

    def send(self, to, subject, body, html_body=None) -> dict:
        params = {
            "from": self.sender,
            "to": [to],
            "subject": subject,
            "text": body,
        }
        if html_body:
            params["html"] = html_body

        try:
            response = resend.Emails.send(params)
        except Exception as exc:
            logger.warning("resend_send_failed", to=to, error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        return {"message_id": response.get("id"), "status": "sent"}
