"""Map HTTP responses and transport failures to client exceptions."""

import logging
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

import httpx

from sonarqube_client.exceptions import (
    IndexingInProgressError,
    SonarQubeAPIError,
    SonarQubeAuthError,
    SonarQubeAuthorizationError,
    SonarQubeError,
    SonarQubeNetworkError,
    SonarQubeNotFoundError,
    SonarQubeRateLimitError,
    SonarQubeServerError,
    SonarQubeTimeoutError,
    SonarQubeValidationError,
)

logger = logging.getLogger(__name__)

INDEXING_MARKERS = ("indexing in progress", "issues index", "index is not ready")


def parse_error_message(response: httpx.Response) -> str:
    """Extract a human-readable message from an error response.

    Understands the v1 ``{"errors": [{"msg": ...}]}`` format and the v2
    ``{"message": ...}`` / ``{"error": {"message": ...}}`` formats.

    Args:
        response: Error response

    Returns:
        Error message, falling back to the reason phrase or ``HTTP <status>``
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        errors = data.get("errors")
        if isinstance(errors, list) and errors:
            messages = [str(err.get("msg", "")) for err in errors if isinstance(err, dict)]
            if any(messages):
                return ", ".join(messages)

        message = data.get("message")
        if isinstance(message, str) and message:
            return message

        error = data.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"]:
            return str(error["message"])

    if response.reason_phrase:
        return response.reason_phrase
    return f"HTTP {response.status_code}"


def is_indexing_error(message: str) -> bool:
    """Check whether a message says the issues index is being rebuilt.

    Args:
        message: Error message or response body

    Returns:
        True if the message matches an indexing marker
    """
    lower = message.lower()
    if any(marker in lower for marker in INDEXING_MARKERS):
        return True
    return "index" in lower and "progress" in lower


def parse_retry_after(value: str | None) -> int | None:
    """Parse a ``Retry-After`` header.

    Args:
        value: Header value, either delay seconds or an HTTP date

    Returns:
        Seconds to wait, or None if the header is missing or malformed
    """
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return int(value)

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)
    delay = (retry_at - datetime.now(UTC)).total_seconds()
    return max(0, int(delay))


def create_error_from_response(response: httpx.Response) -> SonarQubeError:
    """Create the exception matching a non-success response.

    Args:
        response: HTTP response with a non-2xx status

    Returns:
        Exception instance (not raised)
    """
    status = response.status_code
    message = parse_error_message(response)
    details: dict[str, Any] = {"headers": dict(response.headers)}

    logger.debug(f"Request failed with status {status}: {message}")

    if status == 400:
        return SonarQubeValidationError(message, status_code=status)
    if status == 401:
        return SonarQubeAuthError(message)
    if status == 403:
        return SonarQubeAuthorizationError(message)
    if status == 404:
        return SonarQubeNotFoundError(message)
    if status == 429:
        return SonarQubeRateLimitError(message, retry_after=parse_retry_after(response.headers.get("Retry-After")))
    if status == 503 and (is_indexing_error(message) or is_indexing_error(response.text)):
        return IndexingInProgressError(message)
    if 500 <= status < 600:
        return SonarQubeServerError(message, status_code=status, details=details)
    if 400 <= status < 500:
        return SonarQubeAPIError(message, status_code=status, details=details)
    return SonarQubeError(message, code="UNKNOWN_ERROR", status_code=status, details=details)


def create_network_error(exc: Exception) -> SonarQubeNetworkError:
    """Wrap a transport failure.

    Args:
        exc: Exception raised by httpx

    Returns:
        Timeout error for timeouts, network error otherwise
    """
    if isinstance(exc, httpx.TimeoutException):
        return SonarQubeTimeoutError(f"Request timed out: {exc}", cause=exc)
    message = str(exc) or "Network request failed"
    return SonarQubeNetworkError(message, cause=exc)
