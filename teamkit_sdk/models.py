"""Pydantic request/response models for the teamkit SDK.

These mirror the service schemas so callers get typed access to fields.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel


# ── Teams ────────────────────────────────────────────────────────

class AddMemberBody(BaseModel):
    username: str
    role: str


class AddMemberResponse(BaseModel):
    team: str
    username: str
    role: str


class WhoamiResponse(BaseModel):
    username: str


# ── Chat ─────────────────────────────────────────────────────────

class ChatChannel(BaseModel):
    name: str


class ChatMessage(BaseModel):
    body: str


class SendMessageBody(BaseModel):
    channel: ChatChannel
    message: ChatMessage


class ChatError(BaseModel):
    code: Optional[Union[int, str]] = None
    message: str


class SendMessageResponse(BaseModel):
    """Reply envelope of the chat service. ``error`` is None on success."""

    error: Optional[ChatError] = None
    id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None
