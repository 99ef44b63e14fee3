"""Error taxonomy and its HTTP mapping.

Protean already supplies ``ValidationError`` (bad input) and
``ObjectNotFoundError`` (missing aggregate). The storefront adds the
conditions Protean has no name for. Every error reaches the client as
``{"message": str}``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class StorefrontError(Exception):
    """Base class for storefront-specific failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(StorefrontError):
    """A unique field (email, username, slug, name) is already taken."""


class AuthenticationError(StorefrontError):
    """Bad credentials, or a missing, invalid or expired token."""


class PersistenceError(StorefrontError):
    """The store was unreachable or a write failed."""


class PaymentUnavailableError(StorefrontError):
    """The payment gateway could not create a payment intent."""


_DOMAIN_ERRORS = (ValidationError, ObjectNotFoundError, InvalidOperationError, StorefrontError)


def dispatch(command):
    """Process a command synchronously and return the handler's result.

    Domain errors propagate unchanged. Anything else raised while handling or
    committing the unit of work is a store failure and surfaces as
    ``PersistenceError``.
    """
    try:
        return current_domain.process(command, asynchronous=False)
    except _DOMAIN_ERRORS:
        raise
    except Exception as exc:
        logger.error(
            "command_failed",
            command=command.__class__.__name__,
            error=str(exc),
        )
        raise PersistenceError("Storage is unavailable, please retry") from exc


def describe(messages) -> str:
    """Flatten a Protean ``{field: [messages]}`` payload into one line."""
    if isinstance(messages, dict):
        parts = []
        for field, errors in messages.items():
            if isinstance(errors, (list, tuple)):
                errors = ", ".join(str(e) for e in errors)
            # Keys like "_entity" carry no field name worth showing
            parts.append(errors if str(field).startswith("_") else f"{field}: {errors}")
        return "; ".join(parts)
    return str(messages)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers that shape every error response."""

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):  # noqa: ARG001
        return _message(400, describe(getattr(exc, "messages", None) or str(exc)))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):  # noqa: ARG001
        details = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            details.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
        return _message(400, "; ".join(details) or "Invalid request")

    @app.exception_handler(ObjectNotFoundError)
    async def not_found(request: Request, exc: ObjectNotFoundError):  # noqa: ARG001
        return _message(404, describe(getattr(exc, "messages", None) or str(exc)))

    @app.exception_handler(InvalidOperationError)
    async def invalid_operation(request: Request, exc: InvalidOperationError):  # noqa: ARG001
        return _message(400, describe(getattr(exc, "messages", None) or str(exc)))

    @app.exception_handler(ConflictError)
    async def conflict(request: Request, exc: ConflictError):  # noqa: ARG001
        return _message(400, exc.message)

    @app.exception_handler(AuthenticationError)
    async def unauthenticated(request: Request, exc: AuthenticationError):  # noqa: ARG001
        return _message(401, exc.message)

    @app.exception_handler(PersistenceError)
    async def persistence_failure(request: Request, exc: PersistenceError):  # noqa: ARG001
        return _message(500, exc.message)

    @app.exception_handler(PaymentUnavailableError)
    async def payment_unavailable(request: Request, exc: PaymentUnavailableError):  # noqa: ARG001
        return _message(503, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):  # noqa: ARG001
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.error("unhandled_error", path=request.url.path, error=str(exc))
        return _message(500, "Internal server error")
