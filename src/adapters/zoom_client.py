"""Zoom account API client.

Implements `AccountDirectory` over the Zoom REST API v2:

- `GET /users` (paginated with `next_page_token`)
- `GET /users/{id}`
- `PATCH /users/{id}` with `{"type": <tier>}`

Every httpx failure is surfaced as `RemoteCallError`.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from adapters.http_client import build_client
from adapters.zoom_auth import ZoomJWTAuth, require_credentials
from core.config import AppSettings
from core.domain.models import AccountUser, LicenseTier
from core.errors import RemoteCallError

_MAX_BODY_CHARS = 500
# Credential problems are never a plain "not applied".
_AUTH_FAILURES = frozenset({401, 403})


def _body_excerpt(response: httpx.Response) -> str:
    return response.text[:_MAX_BODY_CHARS]


class ZoomClient:
    """Synchronous client for the user endpoints the swap needs."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        api_key, api_secret = require_credentials(api_key, api_secret)
        self._settings = settings or AppSettings()
        self._http = build_client(
            self._settings,
            extra_headers={"Content-Type": "application/json"},
            auth=ZoomJWTAuth(api_key, api_secret, ttl_seconds=self._settings.jwt_ttl_seconds),
            transport=transport,
        )

    def __enter__(self) -> "ZoomClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("{} {}", method, path)
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise RemoteCallError(f"{method} {path} failed: {exc}") from exc
        logger.debug("{} {} -> HTTP {}", method, path, response.status_code)
        return response

    def _read_json(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        response = self._request(method, path, **kwargs)
        if response.is_error:
            raise RemoteCallError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=_body_excerpt(response),
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteCallError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
                body=_body_excerpt(response),
            ) from exc
        if not isinstance(payload, dict):
            raise RemoteCallError(f"{method} {path} returned an unexpected payload")
        return payload

    @staticmethod
    def _parse_user(raw: Any) -> AccountUser:
        try:
            return AccountUser.model_validate(raw)
        except ValidationError as exc:
            raise RemoteCallError(f"Malformed user record: {exc}") from exc

    def list_users(self) -> list[AccountUser]:
        users: list[AccountUser] = []
        params: dict[str, Any] = {"page_size": self._settings.page_size, "status": "active"}
        while True:
            payload = self._read_json("GET", "/users", params=params)
            raw_users = payload.get("users") or []
            if not isinstance(raw_users, list):
                raise RemoteCallError("GET /users returned an unexpected 'users' field")
            users.extend(self._parse_user(raw) for raw in raw_users)

            next_token = payload.get("next_page_token")
            if not next_token:
                break
            params = {**params, "next_page_token": next_token}
        logger.debug("Fetched {} user(s)", len(users))
        return users

    def get_user(self, user_id: str) -> AccountUser:
        return self._parse_user(self._read_json("GET", f"/users/{user_id}"))

    def update_user(self, user_id: str, tier: LicenseTier) -> bool:
        response = self._request("PATCH", f"/users/{user_id}", json={"type": tier.value})
        if response.is_success:
            return True
        if response.status_code in _AUTH_FAILURES:
            raise RemoteCallError(
                f"PATCH /users/{user_id} was refused (HTTP {response.status_code})",
                status_code=response.status_code,
                body=_body_excerpt(response),
            )
        logger.debug(
            "PATCH /users/{} rejected with HTTP {}: {}",
            user_id,
            response.status_code,
            _body_excerpt(response),
        )
        return False
