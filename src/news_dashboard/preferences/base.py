from typing import Protocol


class PreferenceStore(Protocol):
    """Interface for string key-value persistence that survives restarts."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for ``key``, or None if unset."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...
