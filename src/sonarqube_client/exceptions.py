"""SonarQube client exceptions."""

from typing import Any


class SonarQubeError(Exception):
    """Base exception for SonarQube errors.

    Attributes:
        message: Human-readable error message
        code: Stable error category (e.g. ``NOT_FOUND_ERROR``)
        status_code: HTTP status code if the error came from a response
        details: Extra context (response headers, offending field, ...)
    """

    code: str = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Error message
            code: Error category, defaults to the class-level code
            status_code: HTTP status code if available
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.status_code = status_code
        self.details = details or {}


class SonarQubeAPIError(SonarQubeError):
    """API request failed with a client error not covered by a narrower type."""

    code = "API_ERROR"

    def __init__(self, message: str, status_code: int | None = None, details: dict[str, Any] | None = None) -> None:
        """Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code if available
            details: Additional error details
        """
        super().__init__(message, status_code=status_code, details=details)


class SonarQubeValidationError(SonarQubeError):
    """Request parameters are invalid.

    Raised locally by builders before any request is sent, and for
    HTTP 400 responses.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, status_code: int | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Description of the violated constraint
            field: Offending parameter name, if any
            status_code: HTTP status code when reported by the server
        """
        super().__init__(message, status_code=status_code, details={"field": field} if field else None)
        self.field = field


class SonarQubeAuthError(SonarQubeError):
    """Authentication failed."""

    code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, status_code=401)


class SonarQubeAuthorizationError(SonarQubeError):
    """Authenticated user lacks the required permission."""

    code = "AUTHORIZATION_ERROR"

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(message, status_code=403)


class SonarQubeNotFoundError(SonarQubeError):
    """Requested resource does not exist."""

    code = "NOT_FOUND_ERROR"

    def __init__(self, message: str = "Resource not found", resource: str | None = None) -> None:
        super().__init__(message, status_code=404, details={"resource": resource} if resource else None)
        self.resource = resource


class SonarQubeRateLimitError(SonarQubeError):
    """Rate limit exceeded."""

    code = "RATE_LIMIT_ERROR"

    def __init__(self, message: str, retry_after: int | None = None) -> None:
        """Initialize rate limit error.

        Args:
            message: Error message
            retry_after: Seconds to wait before retrying, from ``Retry-After``
        """
        super().__init__(message, status_code=429, details={"retry_after": retry_after})
        self.retry_after = retry_after


class SonarQubeServerError(SonarQubeError):
    """Server returned a 5xx status."""

    code = "SERVER_ERROR"

    def __init__(self, message: str, status_code: int, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, status_code=status_code, details=details)


class IndexingInProgressError(SonarQubeError):
    """Issue indexing is in progress and the operation is temporarily unavailable."""

    code = "INDEXING_IN_PROGRESS"

    def __init__(self, message: str = "Issue indexing in progress, please try again later") -> None:
        super().__init__(message, status_code=503)


class SonarQubeNetworkError(SonarQubeError):
    """The request could not be sent or no response was received."""

    code = "NETWORK_ERROR"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, details={"cause": repr(cause)} if cause else None)
        self.cause = cause


class SonarQubeTimeoutError(SonarQubeNetworkError):
    """The request timed out."""

    code = "TIMEOUT_ERROR"

    def __init__(self, message: str = "Request timed out", cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)


class DeprecatedApiError(SonarQubeError):
    """A deprecated API was used while strict deprecation mode is enabled."""

    code = "DEPRECATED_API"

    def __init__(self, message: str, api: str) -> None:
        super().__init__(message, details={"api": api})
        self.api = api
