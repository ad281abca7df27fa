"""Derived chart data for the filtered article list."""

from collections import Counter
from collections.abc import Iterable

from news_dashboard.data import Article, AuthorHistogram


def author_histogram(articles: Iterable[Article]) -> AuthorHistogram:
    """Count articles per author label.

    Labels keep the order in which each author is first seen, and missing
    authors are counted under "Unknown".
    """
    counts = Counter(article.author_label for article in articles)
    return AuthorHistogram(labels=tuple(counts), values=tuple(counts.values()))
