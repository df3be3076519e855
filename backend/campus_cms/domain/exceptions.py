class CMSError(Exception):
    """
    Base class for every error the CMS core raises.

    Each subclass maps to one HTTP status and a stable machine-readable code.
    Storage backend exceptions are translated into these before they leave
    the application layer.
    """

    status_code = 500
    code = "InternalError"
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class Unauthenticated(CMSError):
    status_code = 401
    code = "Unauthenticated"
    default_message = "Authentication required"


class Forbidden(CMSError):
    status_code = 403
    code = "Forbidden"
    default_message = "Insufficient permissions"


class NotFound(CMSError):
    # Also raised for entities owned by another tenant.
    status_code = 404
    code = "NotFound"
    default_message = "Resource not found"


class Conflict(CMSError):
    status_code = 409
    code = "Conflict"
    default_message = "Resource conflict"


class InvalidState(CMSError):
    status_code = 409
    code = "InvalidState"
    default_message = "Operation not allowed in the current state"


class InvariantViolation(CMSError):
    status_code = 400
    code = "InvariantViolation"
    default_message = "Domain invariant violated"


class StorageUnavailable(CMSError):
    """Safe to retry: nothing was committed."""

    status_code = 503
    code = "StorageUnavailable"
    default_message = "Storage temporarily unavailable"
