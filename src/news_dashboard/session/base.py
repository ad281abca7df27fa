from collections.abc import Callable
from typing import Protocol

from news_dashboard.data import User

SessionCallback = Callable[[User | None], None]
Unsubscribe = Callable[[], None]


class AuthenticationError(Exception):
    """Sign-in or sign-up was rejected by the identity provider."""


class SessionGateway(Protocol):
    """Interface for an identity provider's session state."""

    @property
    def current_user(self) -> User | None: ...

    def subscribe(self, callback: SessionCallback) -> Unsubscribe:
        """Register ``callback`` for session changes.

        The callback is invoked immediately with the current user (None when
        signed out) and again after every change.

        Returns:
            A callable that removes the subscription. Calling it more than
            once is harmless.
        """
        ...

    async def sign_out(self) -> None:
        """End the current session and notify subscribers."""
        ...


class SessionBroadcaster:
    """Holds the current user and fans changes out to subscribers."""

    def __init__(self, user: User | None = None) -> None:
        self._user = user
        self._callbacks: list[SessionCallback] = []

    @property
    def current_user(self) -> User | None:
        return self._user

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: SessionCallback) -> Unsubscribe:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        callback(self._user)
        return unsubscribe

    def _set_user(self, user: User | None) -> None:
        self._user = user
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._callbacks):
            callback(user)
