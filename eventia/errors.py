"""Domain errors shared by every slice of the API.

Each error knows the HTTP status and the machine-stable code it renders as,
so routers can let them propagate and ``eventia.main`` turns them into
responses in one place.
"""


class EventiaError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.code.replace("_", " ")
        super().__init__(self.message)


class UnauthenticatedError(EventiaError):
    """No identity could be established for the request."""

    status_code = 401
    code = "unauthenticated"

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InvalidCredentialError(UnauthenticatedError):
    """A credential was supplied but is malformed, badly signed or expired."""

    code = "invalid_credential"

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class ForbiddenError(EventiaError):
    status_code = 403
    code = "forbidden"

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(message)


class ValidationError(EventiaError):
    """Input failed validation. ``field`` names the first failing field."""

    status_code = 400
    code = "validation_error"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class NotFoundError(EventiaError):
    status_code = 404
    code = "not_found"


class UnavailableError(EventiaError):
    """A referenced catalog entry exists but cannot be used right now."""

    status_code = 400
    code = "unavailable"


class EmptyCartError(EventiaError):
    status_code = 400
    code = "empty_cart"

    def __init__(self, message: str = "Cart is empty") -> None:
        super().__init__(message)


class ConflictError(EventiaError):
    status_code = 409
    code = "conflict"
