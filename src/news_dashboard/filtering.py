"""Client-side article filtering.

All predicates compose as a logical AND. A predicate whose criterion is empty
is skipped, so an empty ``FilterCriteria`` returns the input unchanged. The
input order is always preserved.
"""

from collections.abc import Iterable

from news_dashboard.data import Article, DateRange, FilterCriteria


def matches_author(article: Article, author_substring: str) -> bool:
    """Case-insensitive substring match against the author label."""
    return author_substring.lower() in article.author_label.lower()


def matches_date_range(article: Article, date_range: DateRange) -> bool:
    return date_range.contains(article.published_at)


def matches_search(article: Article, search_text: str) -> bool:
    """Case-insensitive substring match against the title only."""
    return search_text.lower() in article.title.lower()


def filter_articles(articles: Iterable[Article], criteria: FilterCriteria) -> list[Article]:
    """Return the articles satisfying every active predicate in ``criteria``.

    Args:
        articles: Articles in display order.
        criteria: Search text, author substring and date bounds.

    Returns:
        A new list holding the matching articles in their original order.
    """
    results = list(articles)

    if criteria.author_substring:
        results = [a for a in results if matches_author(a, criteria.author_substring)]

    if criteria.date_range.is_active:
        results = [a for a in results if matches_date_range(a, criteria.date_range)]

    if criteria.search_text:
        results = [a for a in results if matches_search(a, criteria.search_text)]

    return results
