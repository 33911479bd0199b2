"""Resolve bearer tokens to user ids through an external identity service."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

import requests

from dayscore.core.config import Settings
from dayscore.core.errors import AuthError

LOGGER = logging.getLogger(__name__)


class IdentityResolver(Protocol):
    def resolve(self, token: str) -> str:
        """Return the stable user id for ``token`` or raise AuthError."""


class HttpIdentityResolver:
    """Asks the identity service's user endpoint who owns a token.

    The endpoint is expected to answer ``GET <url>`` with a JSON user object
    carrying ``id`` (or ``sub``) when the bearer token is valid.
    """

    def __init__(self, url: str, api_key: Optional[str] = None, timeout: int = 10) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpIdentityResolver":
        if not settings.DAYSCORE_IDENTITY_URL:
            raise RuntimeError("DAYSCORE_IDENTITY_URL must be set when DAYSCORE_AUTH_MODE=required")
        return cls(
            url=settings.DAYSCORE_IDENTITY_URL,
            api_key=settings.DAYSCORE_IDENTITY_API_KEY,
            timeout=settings.DAYSCORE_IDENTITY_TIMEOUT,
        )

    def _headers(self, token: str) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {token}"}
        if self.api_key:
            headers["apikey"] = self.api_key
        return headers

    def resolve(self, token: str) -> str:
        try:
            res = requests.get(self.url, headers=self._headers(token), timeout=self.timeout)
        except requests.RequestException as exc:
            LOGGER.warning("Identity service unreachable: %s", exc)
            raise AuthError("Identity service unavailable") from exc

        if not res.ok:
            LOGGER.info("Identity service rejected token -> %s %s", res.status_code, res.reason)
            raise AuthError("Invalid token")

        try:
            body: Any = res.json()
        except ValueError as exc:
            raise AuthError("Invalid identity response") from exc

        user_id = None
        if isinstance(body, dict):
            user_id = body.get("id") or body.get("sub")
        if not user_id:
            raise AuthError("Invalid token")
        return str(user_id)
