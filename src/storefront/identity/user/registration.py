"""User registration: command and handler."""

from protean import handle
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import ConflictError
from storefront.identity.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create an account. The password arrives already hashed."""

    username: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    is_admin: Boolean(default=False)
    external_id: String(max_length=255)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.by_email(command.email):
            raise ConflictError("Email already registered")
        if repo.by_username(command.username):
            raise ConflictError("Username already taken")

        user = User.register(
            username=command.username,
            email=command.email,
            password_hash=command.password_hash,
            is_admin=command.is_admin,
            external_id=command.external_id,
        )
        repo.add(user)
        logger.info("user_registered", user_id=str(user.id))
        return user
