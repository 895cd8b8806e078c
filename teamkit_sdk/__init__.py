"""teamkit Python SDK — typed clients for the team and chat services."""

from teamkit_sdk.chat import ChatClient
from teamkit_sdk.client import TeamsClient
from teamkit_sdk.errors import (
    ApiError,
    AuthError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)

__version__ = "0.3.0"

__all__ = [
    "TeamsClient",
    "ChatClient",
    "ApiError",
    "AuthError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "ValidationError",
]
