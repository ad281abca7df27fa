"""Session gateways: who is signed in, and how to sign out."""

from news_dashboard.session.base import (
    AuthenticationError,
    SessionBroadcaster,
    SessionCallback,
    SessionGateway,
    Unsubscribe,
)
from news_dashboard.session.firebase import FirebaseSessionGateway
from news_dashboard.session.memory import InMemorySessionGateway

__all__ = [
    "AuthenticationError",
    "FirebaseSessionGateway",
    "InMemorySessionGateway",
    "SessionBroadcaster",
    "SessionCallback",
    "SessionGateway",
    "Unsubscribe",
]
