"""In-memory email adapter used in development and tests."""

from uuid import uuid4

from storefront.notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    """Keeps every message in ``outbox`` instead of delivering it."""

    def __init__(self):
        self.outbox: list[dict] = []
        self.failure: str | None = None

    def fail_with(self, reason: str | None) -> None:
        """Make subsequent sends report failure; ``None`` restores delivery."""
        self.failure = reason

    def send(self, to, subject, body, html_body=None) -> dict:
        if self.failure:
            return {"message_id": None, "status": "failed", "error": self.failure}

        message_id = f"msg-{uuid4().hex[:12]}"
        self.outbox.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "body": body,
                "html_body": html_body,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def messages_to(self, address: str) -> list[dict]:
        return [m for m in self.outbox if m["to"] == address]

    def reset(self) -> None:
        self.outbox.clear()
        self.failure = None
