"""Acting-user identity used to address the welcome chat message.

The identity is passed explicitly into the notifier so it can be swapped
for a fixed value in tests.
"""

from __future__ import annotations

import logging
from typing import Optional

from teamkit_sdk import TeamsClient

logger = logging.getLogger(__name__)


class StaticIdentity:
    """A username known up front, e.g. from settings."""

    def __init__(self, username: str) -> None:
        self._username = username

    def username(self) -> str:
        return self._username


class ServiceIdentity:
    """Asks the team service who the API key belongs to, once."""

    def __init__(self, client: TeamsClient) -> None:
        self._client = client
        self._username: Optional[str] = None

    def username(self) -> str:
        if self._username is None:
            self._username = self._client.whoami().username
            logger.debug("Resolved acting user via whoami: %s", self._username)
        return self._username


def identity_for(username: str, client: TeamsClient):
    """Configured username if set, else a whoami lookup."""
    if username:
        return StaticIdentity(username)
    return ServiceIdentity(client)
