"""Custom domain exceptions for the application."""

from enum import Enum


class FailureCategory(str, Enum):
    """Closed set of failure classifications exposed to API consumers."""

    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    UNKNOWN_OBJECT = "UnknownObject"
    SECURITY_EXCEPTION = "SecurityException"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    # Upstream HTTP failure; its status travels with the error.
    ERROR_RESPONSE = "ErrorResponse"


CATEGORY_STATUS: dict[FailureCategory, int] = {
    FailureCategory.BAD_REQUEST: 400,
    FailureCategory.UNAUTHORIZED: 401,
    FailureCategory.FORBIDDEN: 403,
    FailureCategory.NOT_FOUND: 404,
    FailureCategory.UNKNOWN_OBJECT: 422,
    FailureCategory.SECURITY_EXCEPTION: 401,
    FailureCategory.INTERNAL_SERVER_ERROR: 500,
    FailureCategory.ERROR_RESPONSE: 500,
}

DETAILS_LABEL = "Details"

# Never chosen by a reverse status lookup.
_STATUS_ONLY_CATEGORIES = (FailureCategory.ERROR_RESPONSE, FailureCategory.SECURITY_EXCEPTION)


def status_for(category: FailureCategory | str) -> int:
    """Return the HTTP status for a category; unknown labels map to 500."""
    try:
        return CATEGORY_STATUS[FailureCategory(category)]
    except ValueError:
        return 500


def category_for_status(status_code: int) -> FailureCategory:
    """Reverse lookup used when only a status code is known."""
    for category, code in CATEGORY_STATUS.items():
        if code == status_code and category not in _STATUS_ONLY_CATEGORIES:
            return category
    return FailureCategory.INTERNAL_SERVER_ERROR


class ApiError(Exception):
    """Base exception for errors that map onto a failure category."""

    category: FailureCategory = FailureCategory.INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None):
        super().__init__(message)
        self.message = message


class BadRequestError(ApiError):
    """Raised when the request is malformed or fails validation."""

    category = FailureCategory.BAD_REQUEST


class UnauthorizedError(ApiError):
    """Raised when the caller is not authenticated."""

    category = FailureCategory.UNAUTHORIZED


class ForbiddenError(ApiError):
    """Raised when the caller lacks permission for the resource."""

    category = FailureCategory.FORBIDDEN


class SecurityError(ApiError):
    """Raised when a credential is present but fails verification."""

    category = FailureCategory.SECURITY_EXCEPTION


class NotFoundError(ApiError):
    """Raised when a requested resource does not exist."""

    category = FailureCategory.NOT_FOUND


class UnknownObjectError(ApiError):
    """Raised when an identifier cannot be resolved to a known object."""

    category = FailureCategory.UNKNOWN_OBJECT


class HttpResponseError(ApiError):
    """Raised to relay an upstream HTTP failure with its own status and details."""

    category = FailureCategory.ERROR_RESPONSE

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        details: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.details = dict(details or {})
