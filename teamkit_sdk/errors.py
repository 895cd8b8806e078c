"""Structured exceptions for the teamkit SDK."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    """Base exception for all service errors.

    ``str(err)`` is the server's message verbatim so the CLI can surface it
    unchanged; the status code stays available on ``status_code``.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        detail: Any = None,
        request_id: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.detail = detail
        self.request_id = request_id
        super().__init__(message)


class AuthError(ApiError):
    """401 Unauthorized — missing or invalid API key."""
    pass


class ForbiddenError(ApiError):
    """403 Forbidden — caller may not manage this team."""
    pass


class NotFoundError(ApiError):
    """404 Not Found — unknown team or user."""
    pass


class ValidationError(ApiError):
    """422 Unprocessable Entity — request rejected by server-side policy."""
    pass


class RateLimitedError(ApiError):
    """429 Too Many Requests."""
    pass


class ServerError(ApiError):
    """500+ — server-side error."""
    pass
