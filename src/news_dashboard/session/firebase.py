"""Firebase Authentication via the Identity Toolkit REST API."""

import logging
import os
from typing import Any

import httpx

from news_dashboard.data import User
from news_dashboard.session.base import AuthenticationError, SessionBroadcaster

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1/accounts"

logger = logging.getLogger(__name__)


class FirebaseSessionGateway(SessionBroadcaster):
    """Email/password sessions backed by Firebase Authentication.

    Sessions live only in this process; signing out forgets the ID token
    without contacting Firebase.

    Args:
        api_key: Firebase web API key (defaults to FIREBASE_API_KEY env var).
        timeout: Request timeout in seconds.
    """

    def __init__(self, *, api_key: str | None = None, timeout: float = 30.0) -> None:
        super().__init__()
        self._api_key = api_key or os.environ.get("FIREBASE_API_KEY")
        if not self._api_key:
            raise ValueError(
                "Firebase API key required. Pass api_key or set FIREBASE_API_KEY env var."
            )
        self._timeout = timeout

    async def sign_in_with_password(self, email: str, password: str) -> User:
        """Sign in an existing account and notify subscribers.

        Raises:
            AuthenticationError: If Firebase rejects the credentials or is
                unreachable.
        """
        user = await self._authenticate("signInWithPassword", email, password)
        self._set_user(user)
        return user

    async def sign_up(self, email: str, password: str) -> User:
        """Register a new account; the new user is signed in."""
        user = await self._authenticate("signUp", email, password)
        self._set_user(user)
        return user

    async def sign_out(self) -> None:
        self._set_user(None)

    async def _authenticate(self, action: str, email: str, password: str) -> User:
        payload = {"email": email, "password": password, "returnSecureToken": True}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{IDENTITY_TOOLKIT_URL}:{action}",
                    params={"key": self._api_key},  # type: ignore[dict-item]
                    json=payload,
                )
        except httpx.HTTPError as e:
            logger.warning(f"Could not reach Firebase for {action}. Error: {e}")
            raise AuthenticationError("Authentication service unavailable") from e

        try:
            body: Any = response.json()
        except ValueError:
            body = None
        data: dict[str, Any] = body if isinstance(body, dict) else {}
        if response.is_error:
            error = data.get("error")
            message = error.get("message") if isinstance(error, dict) else None
            raise AuthenticationError(message or f"HTTP {response.status_code}")

        return User(
            uid=data.get("localId", ""),
            email=data.get("email", email),
            id_token=data.get("idToken"),
        )
