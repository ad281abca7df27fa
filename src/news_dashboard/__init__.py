"""News Dashboard: sign in, fetch headlines, filter them and track payouts."""

from news_dashboard.analytics import author_histogram
from news_dashboard.config import DashboardConfig, create_from_config, load_config
from news_dashboard.dashboard import Dashboard
from news_dashboard.data import (
    Article,
    AuthorHistogram,
    DateRange,
    FetchStatus,
    FilterCriteria,
    Theme,
    User,
)
from news_dashboard.filtering import filter_articles
from news_dashboard.payout import format_total, parse_rate, total_payout
from news_dashboard.preferences import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)
from news_dashboard.report import ReportWriter
from news_dashboard.session import (
    AuthenticationError,
    FirebaseSessionGateway,
    InMemorySessionGateway,
    SessionGateway,
)
from news_dashboard.source import (
    ArticleSource,
    FetchFailure,
    JsonFileArticleSource,
    NewsAPISource,
)

__all__ = [
    # Models
    "Article",
    "AuthorHistogram",
    "DateRange",
    "FetchStatus",
    "FilterCriteria",
    "Theme",
    "User",
    # Filtering and aggregation
    "author_histogram",
    "filter_articles",
    "format_total",
    "parse_rate",
    "total_payout",
    # Protocols
    "ArticleSource",
    "PreferenceStore",
    "SessionGateway",
    # Errors
    "AuthenticationError",
    "FetchFailure",
    # Sources
    "JsonFileArticleSource",
    "NewsAPISource",
    # Sessions
    "FirebaseSessionGateway",
    "InMemorySessionGateway",
    # Preferences
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    # View model
    "Dashboard",
    # Reports
    "ReportWriter",
    # Config
    "DashboardConfig",
    "create_from_config",
    "load_config",
]
