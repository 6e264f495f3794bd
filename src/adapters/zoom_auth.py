"""JWT bearer auth for the Zoom API.

Each request carries a short-lived HS256 token: `iss` is the API key and the
signature uses the API secret.

Notes:
- A token is reused until shortly before it expires.
- Zoom no longer issues new JWT app credentials; accounts without a legacy
  JWT app need a Server-to-Server OAuth app instead.
"""

from __future__ import annotations

import time
from typing import Callable, Generator

import httpx
import jwt

from core.errors import ConfigurationError

_REFRESH_MARGIN_SECONDS = 5


def require_credentials(api_key: str | None, api_secret: str | None) -> tuple[str, str]:
    """Both credentials must be present and non-blank; returns them stripped."""

    key = (api_key or "").strip()
    secret = (api_secret or "").strip()
    if not key or not secret:
        raise ConfigurationError(
            "Must supply api key and secret, aborting...",
            context={"key": bool(key), "secret": bool(secret)},
        )
    return key, secret


def sign_token(api_key: str, api_secret: str, *, ttl_seconds: int, now: float | None = None) -> str:
    issued = int(now if now is not None else time.time())
    payload = {"iss": api_key, "exp": issued + ttl_seconds}
    return jwt.encode(payload, api_secret, algorithm="HS256", headers={"typ": "JWT"})


class ZoomJWTAuth(httpx.Auth):
    """httpx auth flow that attaches `Authorization: Bearer <jwt>`."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        ttl_seconds: int = 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._api_key = api_key
        self._api_secret = api_secret
        self._ttl = ttl_seconds
        self._clock = clock
        self._token: str | None = None
        self._expires_at = 0.0

    def token(self) -> str:
        now = self._clock()
        if self._token is None or now >= self._expires_at - _REFRESH_MARGIN_SECONDS:
            self._token = sign_token(self._api_key, self._api_secret, ttl_seconds=self._ttl, now=now)
            self._expires_at = int(now) + self._ttl
        return self._token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token()}"
        yield request
