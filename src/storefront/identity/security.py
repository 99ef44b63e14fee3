"""Password hashing and bearer tokens.

Passwords are hashed with bcrypt. Tokens are HS256 JWTs carrying the user id
in ``sub``, signed with ``SESSION_SECRET`` and valid for ``TOKEN_TTL_DAYS``
(7 by default).
"""

import os
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt
from fastapi import Header

from storefront.errors import AuthenticationError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_ALGORITHM = "HS256"
_DEV_SECRET = "raiaura-development-secret"


def _secret() -> str:
    return os.environ.get("SESSION_SECRET", _DEV_SECRET)


def _ttl() -> timedelta:
    return timedelta(days=int(os.environ.get("TOKEN_TTL_DAYS", "7")))


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def issue_token(user_id) -> str:
    now = datetime.now(UTC)
    payload = {"sub": str(user_id), "iat": now, "exp": now + _ttl()}
    return jwt.encode(payload, _secret(), algorithm=_ALGORITHM)


def decode_token(token: str) -> str:
    """Return the user id carried by a valid token."""
    try:
        payload = jwt.decode(token, _secret(), algorithms=[_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired") from None
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token") from None

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid token")
    return user_id


def _bearer(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def current_user_id(authorization: str | None = Header(None)) -> str:
    """FastAPI dependency: the authenticated user's id, or 401."""
    token = _bearer(authorization)
    if token is None:
        raise AuthenticationError("Authentication required")
    return decode_token(token)


async def optional_user_id(authorization: str | None = Header(None)) -> str | None:
    """FastAPI dependency: the user's id when a valid token is sent, else None."""
    token = _bearer(authorization)
    if token is None:
        return None
    try:
        return decode_token(token)
    except AuthenticationError as exc:
        logger.info("ignored_bearer_token", reason=exc.message)
        return None
