"""ChatClient — typed client for the messaging service."""

from __future__ import annotations

import logging

from teamkit_sdk.client import BaseClient
from teamkit_sdk.models import ChatChannel, ChatMessage, SendMessageBody, SendMessageResponse

logger = logging.getLogger(__name__)


class ChatClient(BaseClient):
    """Synchronous client for the chat service.

    A service-level rejection comes back inside the reply envelope
    (``SendMessageResponse.error``); HTTP errors and unreadable replies
    raise ``ApiError``.
    """

    def send_message(self, channel: str, body: str) -> SendMessageResponse:
        """POST /v1/chat/send"""
        payload = SendMessageBody(
            channel=ChatChannel(name=channel),
            message=ChatMessage(body=body),
        )
        logger.debug("POST /v1/chat/send channel=%s", channel)
        resp = self._post("/v1/chat/send", json=payload.model_dump())
        if not resp.content:
            return SendMessageResponse()
        return self._parse(resp, SendMessageResponse)
