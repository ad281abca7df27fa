"""Configuration module for the news dashboard."""

from news_dashboard.config.factory import create_from_config
from news_dashboard.config.loader import get_default_config_path, load_config
from news_dashboard.config.models import (
    DashboardConfig,
    FileSourceConfig,
    FirebaseSessionConfig,
    JsonFilePreferencesConfig,
    MemoryPreferencesConfig,
    MemorySessionConfig,
    NewsAPISourceConfig,
    PreferencesConfig,
    ReportConfig,
    SessionConfig,
    SourceConfig,
)

__all__ = [
    "DashboardConfig",
    "FileSourceConfig",
    "FirebaseSessionConfig",
    "JsonFilePreferencesConfig",
    "MemoryPreferencesConfig",
    "MemorySessionConfig",
    "NewsAPISourceConfig",
    "PreferencesConfig",
    "ReportConfig",
    "SessionConfig",
    "SourceConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
