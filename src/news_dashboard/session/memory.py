"""In-process session gateway for local use and tests."""

from news_dashboard.data import User
from news_dashboard.session.base import SessionBroadcaster


class InMemorySessionGateway(SessionBroadcaster):
    """Session gateway whose user is set directly by the caller.

    Args:
        user: User to start signed in as, or None to start signed out.
    """

    def sign_in(self, user: User) -> None:
        self._set_user(user)

    async def sign_out(self) -> None:
        self._set_user(None)
