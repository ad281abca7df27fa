"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from news_dashboard.config import (
    DashboardConfig,
    FileSourceConfig,
    FirebaseSessionConfig,
    JsonFilePreferencesConfig,
    MemoryPreferencesConfig,
    MemorySessionConfig,
    NewsAPISourceConfig,
    ReportConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from news_dashboard.config.factory import create_preferences, create_session, create_source
from news_dashboard.dashboard import Dashboard
from news_dashboard.preferences import InMemoryPreferenceStore, JsonFilePreferenceStore
from news_dashboard.report import ReportWriter
from news_dashboard.session import FirebaseSessionGateway, InMemorySessionGateway
from news_dashboard.source import JsonFileArticleSource, NewsAPISource


def _load(yaml_content: str) -> DashboardConfig:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(yaml_content)
        f.flush()
        return load_config(Path(f.name))


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_newsapi_source_config_defaults(self) -> None:
        config = NewsAPISourceConfig()
        assert config.type == "newsapi"
        assert config.category == "general"
        assert config.page_size == 10
        assert config.api_key is None

    def test_newsapi_page_size_bounds(self) -> None:
        with pytest.raises(ValidationError):
            NewsAPISourceConfig(page_size=0)
        with pytest.raises(ValidationError):
            NewsAPISourceConfig(page_size=101)

    def test_memory_session_config_defaults(self) -> None:
        config = MemorySessionConfig()
        assert config.type == "memory"
        assert config.email == "local@example.com"

    def test_json_file_preferences_defaults(self) -> None:
        config = JsonFilePreferencesConfig()
        assert config.path == ".news_dashboard/preferences.json"

    def test_report_config_defaults(self) -> None:
        config = ReportConfig()
        assert config.enabled is False
        assert config.report_dir == "reports"

    def test_root_defaults(self) -> None:
        config = DashboardConfig()
        assert isinstance(config.source, NewsAPISourceConfig)
        assert isinstance(config.session, MemorySessionConfig)
        assert isinstance(config.preferences, JsonFilePreferencesConfig)

    def test_configs_are_frozen(self) -> None:
        config = NewsAPISourceConfig()
        with pytest.raises(ValidationError):
            config.category = "sports"  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_newsapi_config(self) -> None:
        config = _load(
            """
source:
  type: newsapi
  category: technology
  page_size: 20
session:
  type: firebase
  api_key: abc
preferences:
  type: memory
report:
  enabled: true
  report_dir: out
"""
        )
        assert isinstance(config.source, NewsAPISourceConfig)
        assert config.source.category == "technology"
        assert config.source.page_size == 20
        assert isinstance(config.session, FirebaseSessionConfig)
        assert config.session.api_key == "abc"
        assert isinstance(config.preferences, MemoryPreferencesConfig)
        assert config.report.enabled is True

    def test_load_file_source_config(self) -> None:
        config = _load(
            """
source:
  type: file
  path: fixtures/articles.json
"""
        )
        assert isinstance(config.source, FileSourceConfig)
        assert config.source.path == "fixtures/articles.json"
        assert config.source.category == "general"

    def test_empty_file_gives_defaults(self) -> None:
        assert _load("") == DashboardConfig()

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _load("source:\n  type: rss\n")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert isinstance(config, DashboardConfig)


class TestFactoryFunctions:
    """Tests for factory functions."""

    def test_create_newsapi_source(self) -> None:
        source = create_source(NewsAPISourceConfig(api_key="k", page_size=5))
        assert isinstance(source, NewsAPISource)
        assert source._page_size == 5

    def test_create_file_source(self) -> None:
        source = create_source(FileSourceConfig(path="x.json"))
        assert isinstance(source, JsonFileArticleSource)

    def test_create_memory_session_signed_in(self) -> None:
        session = create_session(MemorySessionConfig(email="me@example.com"))
        assert isinstance(session, InMemorySessionGateway)
        assert session.current_user is not None
        assert session.current_user.email == "me@example.com"

    def test_create_memory_session_signed_out(self) -> None:
        session = create_session(MemorySessionConfig(email=None))
        assert session.current_user is None

    def test_create_firebase_session(self) -> None:
        session = create_session(FirebaseSessionConfig(api_key="k"))
        assert isinstance(session, FirebaseSessionGateway)

    def test_create_preferences(self, tmp_path: Path) -> None:
        assert isinstance(create_preferences(MemoryPreferencesConfig()), InMemoryPreferenceStore)
        store = create_preferences(JsonFilePreferencesConfig(path=str(tmp_path / "p.json")))
        assert isinstance(store, JsonFilePreferenceStore)

    def test_create_source_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown source config type"):
            create_source("bogus")  # type: ignore[arg-type]

    def test_create_from_config(self) -> None:
        config = DashboardConfig(
            source=FileSourceConfig(path="x.json", category="science"),
            preferences=MemoryPreferencesConfig(),
        )
        dashboard, session, report_writer = create_from_config(config)
        assert isinstance(dashboard, Dashboard)
        assert isinstance(session, InMemorySessionGateway)
        assert report_writer is None
        assert dashboard._category == "science"

    def test_create_from_config_report_override(self, tmp_path: Path) -> None:
        config = DashboardConfig(
            source=FileSourceConfig(path="x.json"),
            preferences=MemoryPreferencesConfig(),
        )
        _, _, report_writer = create_from_config(
            config, report_override=True, report_dir_override=str(tmp_path)
        )
        assert isinstance(report_writer, ReportWriter)
        assert report_writer.enabled
