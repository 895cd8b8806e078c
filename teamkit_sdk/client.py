"""TeamsClient — typed client for the team-management service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
import pydantic

from teamkit_sdk.auth import build_auth_headers
from teamkit_sdk.errors import (
    ApiError,
    AuthError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from teamkit_sdk.models import AddMemberBody, AddMemberResponse, WhoamiResponse
from teamkit_sdk.utils import generate_request_id

logger = logging.getLogger(__name__)

_STATUS_TO_ERROR = {
    401: AuthError,
    403: ForbiddenError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitedError,
}


class BaseClient:
    """Shared plumbing: auth headers, request ids, error envelopes.

    Never retries. One method call is one HTTP request.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._client = httpx.Client(
            base_url=self._base_url, timeout=self._timeout, transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── Internal helpers ─────────────────────────────────────────

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        headers.update(build_auth_headers(self._api_key))
        if extra:
            headers.update(extra)
        if "x-request-id" not in {k.lower() for k in headers}:
            headers["X-Request-ID"] = generate_request_id()
        return headers

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.status_code < 400:
            return
        request_id = resp.headers.get("x-request-id")
        try:
            body = resp.json()
        except ValueError:
            body = resp.text

        if isinstance(body, dict):
            # Normalized error envelope: {"error": {"type": ..., "message": ...}}
            err = body.get("error")
            if isinstance(err, dict):
                message = err.get("message", str(body))
            else:
                message = body.get("message") or body.get("detail") or str(body)
        else:
            message = str(body) or resp.reason_phrase

        error_cls = _STATUS_TO_ERROR.get(resp.status_code)
        if error_cls is None:
            error_cls = ServerError if resp.status_code >= 500 else ApiError
        raise error_cls(resp.status_code, message, body, request_id)

    def _get(self, path: str, **kwargs) -> httpx.Response:
        headers = self._headers(kwargs.pop("headers", None))
        resp = self._client.get(path, headers=headers, **kwargs)
        self._raise_for_status(resp)
        return resp

    def _post(self, path: str, json: Dict[str, Any], **kwargs) -> httpx.Response:
        headers = self._headers(kwargs.pop("headers", None))
        resp = self._client.post(path, json=json, headers=headers, **kwargs)
        self._raise_for_status(resp)
        return resp

    def _parse(self, resp: httpx.Response, model):
        """Validate a 2xx body into ``model``; unreadable bodies raise ApiError."""
        try:
            return model.model_validate(resp.json())
        except (ValueError, pydantic.ValidationError) as e:
            raise ApiError(
                resp.status_code,
                f"unreadable reply from {resp.request.url.path}: {e}",
                resp.text,
                resp.headers.get("x-request-id"),
            ) from e


class TeamsClient(BaseClient):
    """Synchronous client for the team-management service.

    Usage::

        from teamkit_sdk import TeamsClient

        with TeamsClient(base_url="http://localhost:8000", api_key="...") as c:
            c.add_member("eng", "alice", "writer")
    """

    def add_member(self, team: str, username: str, role: str) -> Optional[AddMemberResponse]:
        """POST /v1/teams/{team}/members

        Any 2xx is success. The echoed membership is returned when the server
        sends a readable one, else None.
        """
        body = AddMemberBody(username=username, role=role)
        path = f"/v1/teams/{quote(team, safe='')}/members"
        logger.debug("POST %s username=%s role=%s", path, username, role)
        resp = self._post(path, json=body.model_dump())
        if not resp.content:
            return None
        try:
            return self._parse(resp, AddMemberResponse)
        except ApiError as e:
            logger.debug("Ignoring add-member acknowledgement body: %s", e.message)
            return None

    def whoami(self) -> WhoamiResponse:
        """GET /v1/whoami"""
        resp = self._get("/v1/whoami")
        return self._parse(resp, WhoamiResponse)
