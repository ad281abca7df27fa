"""Factory functions to create components from configuration."""

from pathlib import Path

from news_dashboard.config.models import (
    DashboardConfig,
    FileSourceConfig,
    FirebaseSessionConfig,
    JsonFilePreferencesConfig,
    MemoryPreferencesConfig,
    MemorySessionConfig,
    NewsAPISourceConfig,
    PreferencesConfig,
    SessionConfig,
    SourceConfig,
)
from news_dashboard.dashboard import Dashboard
from news_dashboard.data import User
from news_dashboard.preferences import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)
from news_dashboard.report import ReportWriter
from news_dashboard.session import FirebaseSessionGateway, InMemorySessionGateway, SessionGateway
from news_dashboard.source import ArticleSource, JsonFileArticleSource, NewsAPISource


def create_source(config: SourceConfig) -> ArticleSource:
    """Create an article source from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, NewsAPISourceConfig):
        return NewsAPISource(api_key=config.api_key, page_size=config.page_size)
    if isinstance(config, FileSourceConfig):
        return JsonFileArticleSource(config.path, page_size=config.page_size)
    msg = f"Unknown source config type: {type(config)}"
    raise ValueError(msg)


def create_session(config: SessionConfig) -> SessionGateway:
    """Create a session gateway from config."""
    if isinstance(config, MemorySessionConfig):
        user = User(uid="local", email=config.email) if config.email else None
        return InMemorySessionGateway(user)
    if isinstance(config, FirebaseSessionConfig):
        return FirebaseSessionGateway(api_key=config.api_key)
    msg = f"Unknown session config type: {type(config)}"
    raise ValueError(msg)


def create_preferences(config: PreferencesConfig) -> PreferenceStore:
    """Create a preference store from config."""
    if isinstance(config, MemoryPreferencesConfig):
        return InMemoryPreferenceStore()
    if isinstance(config, JsonFilePreferencesConfig):
        return JsonFilePreferenceStore(Path(config.path).expanduser())
    msg = f"Unknown preferences config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: DashboardConfig,
    *,
    report_override: bool | None = None,
    report_dir_override: str | None = None,
) -> tuple[Dashboard, SessionGateway, ReportWriter | None]:
    """Create a dashboard and its collaborators from root config.

    Args:
        config: Root configuration.
        report_override: Override the config's report.enabled setting.
        report_dir_override: Override the config's report.report_dir setting.

    Returns:
        Tuple of (dashboard, session_gateway, report_writer).
        report_writer is None if reporting is disabled.
    """
    report_enabled = report_override if report_override is not None else config.report.enabled
    report_dir = Path(
        report_dir_override if report_dir_override is not None else config.report.report_dir
    )

    report_writer: ReportWriter | None = None
    if report_enabled:
        report_writer = ReportWriter(report_dir=report_dir, enabled=True)

    session = create_session(config.session)
    dashboard = Dashboard(
        source=create_source(config.source),
        preferences=create_preferences(config.preferences),
        session=session,
        category=config.source.category,
    )
    return (dashboard, session, report_writer)
