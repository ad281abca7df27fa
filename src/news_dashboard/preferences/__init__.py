"""Key-value preference stores."""

from news_dashboard.preferences.base import PreferenceStore
from news_dashboard.preferences.json_file import JsonFilePreferenceStore
from news_dashboard.preferences.memory import InMemoryPreferenceStore

__all__ = ["InMemoryPreferenceStore", "JsonFilePreferenceStore", "PreferenceStore"]
