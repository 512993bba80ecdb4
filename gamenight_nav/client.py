from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

import requests

from .settings import Settings

logger = logging.getLogger(__name__)

CredentialProvider = Callable[[], "str | None"]

ADMIN_NAVIGATION_PATH = "/api/admin/navigation"


class NavigationClientError(RuntimeError):
    """A request to the navigation API failed (transport, status or body)."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


def session_token_provider(storage: Mapping[str, str]) -> CredentialProvider:
    """Build a provider that finds an access token in a session key/value store.

    Looks for keys shaped like ``sb-<project>-auth-token`` whose value is a JSON
    object with an ``access_token``. Unreadable entries are skipped.
    """

    def provider() -> str | None:
        for key in list(storage.keys()):
            if not key or not key.startswith("sb-") or not key.endswith("-auth-token"):
                continue
            raw = storage.get(key)
            if not raw:
                continue
            try:
                parsed = json.loads(raw)
            except (TypeError, ValueError):
                continue
            token = parsed.get("access_token") if isinstance(parsed, dict) else None
            if token:
                return str(token)
        return None

    return provider


class NavigationClient:
    """Talks to the admin navigation endpoints over HTTP."""

    def __init__(
        self,
        base_url: str,
        credentials: CredentialProvider | None = None,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        credentials: CredentialProvider | None = None,
        *,
        session: requests.Session | None = None,
    ) -> "NavigationClient":
        """Client pointed at ``NAV_API_URL`` with the ``NAV_REQUEST_TIMEOUT`` timeout."""
        return cls(settings.api_url, credentials, timeout=settings.request_timeout, session=session)

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        token = self.credentials() if self.credentials else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, name: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.base_url}{ADMIN_NAVIGATION_PATH}"
        kwargs: dict[str, Any] = {
            "params": {"name": name},
            "headers": self._headers(),
            "timeout": self.timeout,
        }
        if body is not None:
            kwargs["json"] = body
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise NavigationClientError(f"Failed to contact navigation API: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            message = None
            if isinstance(payload, dict):
                error = payload.get("error")
                message = error if isinstance(error, str) else None
            raise NavigationClientError(
                message or f"Navigation API returned status {response.status_code}.",
                status=response.status_code,
            )
        if not isinstance(payload, dict):
            raise NavigationClientError("Navigation API returned an unreadable body.", status=response.status_code)
        return payload

    def load(self, name: str) -> dict[str, Any]:
        return self._request("GET", name)

    def save(self, name: str, config: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", name, config)
