"""Email channel registry.

Provides singleton access to the email adapter. The in-memory fake is used
unless ``RESEND_API_KEY`` is set, in which case mail goes out through Resend.
"""

import os

_email_channel = None


def get_email_channel():
    """Return the configured email adapter (singleton)."""
    global _email_channel
    if _email_channel is None:
        api_key = os.environ.get("RESEND_API_KEY")
        if api_key:
            from storefront.notifications.channel.resend_email import ResendEmailAdapter

            _email_channel = ResendEmailAdapter(
                api_key=api_key,
                sender=os.environ.get("FROM_EMAIL", "Rai Aura <onboarding@resend.dev>"),
            )
        else:
            from storefront.notifications.channel.fake_email import FakeEmailAdapter

            _email_channel = FakeEmailAdapter()
    return _email_channel


def set_email_channel(adapter) -> None:
    global _email_channel
    _email_channel = adapter


def reset_email_channel() -> None:
    """Drop the singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
