"""Value types for the add-member flow.

All models are plain dataclasses; the request types are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from teamkit_cli.core.roles import TeamRole

WELCOME_TEMPLATE = "Hi {username}, I've invited you to a new team, {team}."


@dataclass(frozen=True)
class AddMemberArgs:
    """Validated command input; the role is still raw text."""

    team: str
    username: str
    role_text: str


@dataclass(frozen=True)
class AddMemberRequest:
    """A fully resolved request to add ``username`` to ``team``."""

    team: str
    username: str
    role: TeamRole

    def to_dict(self) -> Dict[str, Any]:
        return {"team": self.team, "username": self.username, "role": self.role.value}


@dataclass(frozen=True)
class NotificationRequest:
    """Welcome chat message for a member who was just added."""

    channel: str
    body: str

    @classmethod
    def welcome(cls, request: AddMemberRequest, acting_username: str) -> "NotificationRequest":
        """Direct conversation between the invitee and the acting user."""
        return cls(
            channel=",".join([request.username, acting_username]),
            body=WELCOME_TEMPLATE.format(username=request.username, team=request.team),
        )


@dataclass
class NotificationResult:
    """Outcome of the best-effort welcome message."""

    sent: bool
    error: Optional[str] = None
    code: Optional[str] = None


@dataclass
class OperationOutcome:
    """Successful add-member run, possibly with a failed notification."""

    request: AddMemberRequest
    notification: NotificationResult

    @property
    def message(self) -> str:
        username = self.request.username
        if not self.notification.sent:
            return (
                f"Success adding user {username} to {self.request.team}, "
                f"but had an error sending {username} a chat message: "
                f"{self.notification.error}"
            )
        return f"Success! A chat message has been sent to {username}."

    def to_dict(self) -> Dict[str, Any]:
        data = self.request.to_dict()
        data.update({
            "notified": self.notification.sent,
            "notification_error": self.notification.error,
            "message": self.message,
        })
        return data
