"""Best-effort welcome notification for newly added team members.

Any failure here is reported back as a NotificationResult and never raised.
"""

from __future__ import annotations

import logging

import httpx

from teamkit_cli.core.models import AddMemberRequest, NotificationRequest, NotificationResult
from teamkit_sdk import ApiError, ChatClient

logger = logging.getLogger(__name__)

UNREACHABLE = "UNREACHABLE"


def send_welcome(request: AddMemberRequest, chat: ChatClient, identity) -> NotificationResult:
    """Send the welcome message for ``request``; one attempt, no retries."""
    try:
        notification = NotificationRequest.welcome(request, identity.username())
        reply = chat.send_message(notification.channel, notification.body)
    except ApiError as e:
        result = NotificationResult(sent=False, error=e.message, code=str(e.status_code))
    except httpx.HTTPError as e:
        result = NotificationResult(sent=False, error=str(e) or type(e).__name__, code=UNREACHABLE)
    else:
        if reply.error is None:
            logger.info("Welcome message sent to %s", request.username)
            return NotificationResult(sent=True)
        code = reply.error.code
        result = NotificationResult(
            sent=False, error=reply.error.message, code=None if code is None else str(code),
        )

    logger.warning(
        "Welcome message to %s failed (%s): %s",
        request.username, result.code, result.error,
    )
    return result
