"""Data models for the news dashboard."""

from news_dashboard.data.models import (
    UNKNOWN_AUTHOR,
    Article,
    AuthorHistogram,
    DateRange,
    FetchStatus,
    FilterCriteria,
    Theme,
    User,
    parse_timestamp,
)

__all__ = [
    "UNKNOWN_AUTHOR",
    "Article",
    "AuthorHistogram",
    "DateRange",
    "FetchStatus",
    "FilterCriteria",
    "Theme",
    "User",
    "parse_timestamp",
]
