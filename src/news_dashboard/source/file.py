"""Offline article source reading a saved NewsAPI response from disk."""

import json
import logging
from pathlib import Path

from news_dashboard.data import Article
from news_dashboard.source.base import FetchFailure
from news_dashboard.source.newsapi import DEFAULT_PAGE_SIZE, articles_from_payload

logger = logging.getLogger(__name__)


class JsonFileArticleSource:
    """Serve pages of articles from a JSON file shaped like a NewsAPI body.

    Useful for demos and for working without an API key. Articles may carry
    an optional ``category`` field; entries without one match every category.

    Args:
        path: Path to the JSON file.
        page_size: Articles per page (default 10).
    """

    def __init__(self, path: Path | str, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._path = Path(path)
        self._page_size = page_size

    async def fetch_page(self, category: str = "general", page: int = 1) -> list[Article]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Error reading articles from {self._path}. Error: {e}")
            raise FetchFailure() from e

        if isinstance(data, dict) and isinstance(data.get("articles"), list):
            data = {
                "articles": [
                    item
                    for item in data["articles"]
                    if not isinstance(item, dict) or item.get("category", category) == category
                ]
            }

        articles = articles_from_payload(data)
        start = (max(page, 1) - 1) * self._page_size
        return articles[start : start + self._page_size]
