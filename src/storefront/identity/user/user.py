"""User aggregate root: a storefront account."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, String

from storefront.domain import storefront
from storefront.shared.email import normalize_email


@storefront.aggregate
class User:
    """A customer or admin account.

    ``email`` is stored lowercase. ``password`` holds a bcrypt hash and is
    never serialized outward.
    """

    username: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=255)
    is_admin: Boolean(default=False)
    external_id: String(max_length=255)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def register(cls, username, email, password_hash, is_admin=False, external_id=None):
        from storefront.identity.user.events import UserRegistered

        user = cls(
            username=username,
            email=normalize_email(email),
            password=password_hash,
            is_admin=bool(is_admin),
            external_id=external_id,
            created_at=datetime.now(UTC),
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=user.username,
                email=user.email,
                registered_at=user.created_at,
            )
        )
        return user

    @property
    def role(self) -> str:
        return "admin" if self.is_admin else "user"
