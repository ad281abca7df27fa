"""NewsAPI top-headlines source."""

import logging
import os
from typing import Any

import httpx

from news_dashboard.data import Article, parse_timestamp
from news_dashboard.source.base import FetchFailure

NEWSAPI_URL = "https://newsapi.org/v2/top-headlines"
DEFAULT_PAGE_SIZE = 10

logger = logging.getLogger(__name__)


def _text(value: Any) -> str | None:
    """Return ``value`` if it is a non-empty string, else None."""
    return value if isinstance(value, str) and value else None


def articles_from_payload(data: Any) -> list[Article]:
    """Build articles from a NewsAPI-shaped response body.

    Args:
        data: Decoded JSON, expected to look like ``{"articles": [...]}``.

    Returns:
        Articles in payload order. Non-object entries are skipped and fields
        of the wrong type are treated as missing.

    Raises:
        FetchFailure: If the body is not an object or ``articles`` is not a list.
    """
    if not isinstance(data, dict):
        raise FetchFailure()
    items = data.get("articles", [])
    if not isinstance(items, list):
        raise FetchFailure()

    articles: list[Article] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        source = item.get("source")
        source_name = _text(source.get("name")) if isinstance(source, dict) else None
        articles.append(
            Article(
                url=_text(item.get("url")) or "",
                title=_text(item.get("title")) or "",
                author=_text(item.get("author")),
                published_at=parse_timestamp(item.get("publishedAt")),
                source_name=source_name or "",
                description=_text(item.get("description")),
            )
        )
    return articles


class NewsAPISource:
    """Fetch headlines from the NewsAPI ``top-headlines`` endpoint.

    Args:
        api_key: NewsAPI key (defaults to NEWS_API_KEY env var).
        page_size: Articles per page (default 10).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("NEWS_API_KEY")
        if not self._api_key:
            raise ValueError("NewsAPI key required. Pass api_key or set NEWS_API_KEY env var.")
        self._page_size = page_size
        self._timeout = timeout

    async def fetch_page(self, category: str = "general", page: int = 1) -> list[Article]:
        """Fetch one page of top headlines for ``category``.

        Raises:
            FetchFailure: On transport errors, non-2xx status or a body that
                is not valid JSON.
        """
        params: dict[str, str | int] = {
            "category": category,
            "pageSize": self._page_size,
            "page": page,
            "apiKey": self._api_key,  # type: ignore[dict-item]
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(NEWSAPI_URL, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.warning(f"Error fetching news for category {category!r}. Error: {e}")
            raise FetchFailure() from e
        except ValueError as e:
            logger.warning(f"NewsAPI returned a malformed body. Error: {e}")
            raise FetchFailure() from e

        return articles_from_payload(data)
