"""Custom exception hierarchy for the Cinetheque application.

Each error carries the HTTP status and the RFC 7807 title/type slug the
problem-detail handlers render it with.
"""

from starlette import status


class CinethequeError(Exception):
    """Base exception for all Cinetheque errors."""

    title = "Internal server error"
    type_slug = "internal"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CinethequeError):
    """An operation required an entity that does not exist."""

    title = "Resource not found"
    type_slug = "not-found"

    def __init__(self, resource: str, resource_id: object) -> None:
        """Initialize with the resource kind and the missing identity."""
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{resource} with id {resource_id} not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class AlreadyExistsError(CinethequeError):
    """A uniqueness invariant would be violated."""

    title = "Resource already exists"
    type_slug = "conflict"

    def __init__(self, resource: str, key: object | None = None) -> None:
        """Initialize with the resource kind and the conflicting key, when known."""
        self.resource = resource
        self.key = key
        if key is None:
            message = f"{resource} already exists"
        else:
            message = f"{resource} with key {key} already exists"
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)


class InvalidError(CinethequeError):
    """Input validation failed for a field."""

    title = "Validation error"
    type_slug = "validation"

    def __init__(self, field: str, *reasons: str) -> None:
        """Initialize with the offending field and one or more reasons."""
        self.field = field
        self.reasons = reasons or ("is invalid",)
        self.errors = [f"{field}: {reason}" for reason in self.reasons]
        super().__init__(
            "One or more fields are invalid", status_code=status.HTTP_400_BAD_REQUEST
        )


class ForbiddenError(CinethequeError):
    """The caller lacks a required authority."""

    title = "Access forbidden"
    type_slug = "forbidden"

    def __init__(self, message: str = "You are not allowed to access this resource.") -> None:
        """Initialize with 403 status code."""
        super().__init__(message, status_code=status.HTTP_403_FORBIDDEN)


class UnauthorizedError(CinethequeError):
    """Credential missing or invalid.

    ``error_code`` is the OAuth error code reported upstream (or by the
    session check) and is safe to expose to the client.
    """

    title = "Authentication required"
    type_slug = "unauthorized"

    def __init__(
        self,
        error_code: str = "invalid_token",
        message: str = "OAuth2 authentication is missing, invalid or expired.",
    ) -> None:
        """Initialize with the OAuth error code and 401 status code."""
        self.error_code = error_code
        super().__init__(message, status_code=status.HTTP_401_UNAUTHORIZED)


class InternalError(CinethequeError):
    """Unclassified failure. The message is always generic."""

    def __init__(self) -> None:
        """Initialize with a generic message and 500 status code."""
        super().__init__(
            "An unexpected error occurred. Please try again later.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
