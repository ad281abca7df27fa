"""Article sources."""

from news_dashboard.source.base import ArticleSource, FetchFailure
from news_dashboard.source.file import JsonFileArticleSource
from news_dashboard.source.newsapi import NewsAPISource, articles_from_payload

__all__ = [
    "ArticleSource",
    "FetchFailure",
    "JsonFileArticleSource",
    "NewsAPISource",
    "articles_from_payload",
]
