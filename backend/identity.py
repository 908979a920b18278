"""Identity provider client.

Sign-up, sign-in and sign-out are delegated to a hosted GoTrue-compatible
auth service (Supabase Auth). We never see or store credentials beyond
passing them through, and sessions are the provider's JWTs.

Config (env / .env):
    AUTH_URL      base url of the project, e.g. https://xyz.supabase.co
    AUTH_API_KEY  public anon key, sent as the `apikey` header
    APP_URL       where confirmation emails send the user back to
    AUTH_TIMEOUT  seconds, default 10
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

from errors import AuthError, ValidationError

load_dotenv()

logger = logging.getLogger(__name__)


def _error_message(resp: httpx.Response) -> str:
    """Pull the human readable message out of a provider error body."""
    try:
        payload = resp.json()
    except ValueError:
        return resp.text or f"Auth provider returned {resp.status_code}"
    if isinstance(payload, dict):
        for key in ("msg", "error_description", "message", "error"):
            val = payload.get(key)
            if isinstance(val, str) and val.strip():
                return val
    return f"Auth provider returned {resp.status_code}"


class IdentityClient:
    """Thin wrapper over the provider's REST endpoints."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        app_url: str = "http://localhost:3000",
        timeout_s: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/") + "/auth/v1"
        self._api_key = api_key
        self._app_url = app_url.rstrip("/")
        self._timeout = timeout_s
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            headers={"apikey": self._api_key},
            timeout=self._timeout,
            transport=self._transport,
        )

    def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        try:
            with self._client() as client:
                return client.post(path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Auth provider unreachable: %s", e)
            raise AuthError(f"Auth provider unreachable: {e}", original_error=e) from e

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        """Register a user and return the provider's user record.

        Rejections (already registered, weak password...) are ValidationError,
        provider outages (5xx) are AuthError.
        """
        resp = self._post(
            "/signup",
            params={"redirect_to": f"{self._app_url}/auth/callback"},
            json={"email": email, "password": password},
        )
        if resp.status_code >= 500:
            raise AuthError(_error_message(resp))
        if resp.status_code >= 400:
            raise ValidationError(_error_message(resp))
        payload = resp.json()
        # autoconfirm projects answer with a session wrapping the user
        user = payload.get("user") or payload
        if not user.get("id"):
            raise AuthError("Auth provider returned no user")
        return user

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Password grant. Returns the session: access_token, refresh_token, user."""
        resp = self._post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        if resp.status_code >= 400:
            raise AuthError(_error_message(resp))
        session = resp.json()
        if not session.get("access_token"):
            raise AuthError("Auth provider returned no session")
        return session

    def sign_out(self, access_token: str) -> None:
        resp = self._post("/logout", headers={"Authorization": f"Bearer {access_token}"})
        if resp.status_code >= 400:
            raise AuthError(_error_message(resp))


def get_identity_client() -> IdentityClient:
    """FastAPI dependency; overridden in tests."""
    return IdentityClient(
        base_url=os.getenv("AUTH_URL", "http://localhost:54321"),
        api_key=os.getenv("AUTH_API_KEY", ""),
        app_url=os.getenv("APP_URL", "http://localhost:3000"),
        timeout_s=float(os.getenv("AUTH_TIMEOUT", "10")),
    )
