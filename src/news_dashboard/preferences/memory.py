"""In-memory preference store, used in tests and throwaway sessions."""


class InMemoryPreferenceStore:
    """Preference store backed by a plain dict.

    Args:
        initial: Optional values to seed the store with.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
