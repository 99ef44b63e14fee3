"""User lookups by unique field."""

from protean.exceptions import ObjectNotFoundError

from storefront.domain import storefront
from storefront.identity.user.user import User


@storefront.repository(part_of=User)
class UserRepository:
    def find(self, user_id) -> User | None:
        try:
            return self.get(user_id)
        except ObjectNotFoundError:
            return None

    def by_email(self, email: str) -> User | None:
        results = self._dao.query.filter(email=(email or "").strip().lower()).all().items
        return results[0] if results else None

    def by_username(self, username: str) -> User | None:
        results = self._dao.query.filter(username=username).all().items
        return results[0] if results else None
