from typing import Protocol

from news_dashboard.data import Article

DEFAULT_FETCH_ERROR = "Unable to load news articles right now. Please try again later."


class FetchFailure(Exception):
    """An article source could not produce a page of articles.

    The message is safe to show to the user.
    """

    def __init__(self, message: str = DEFAULT_FETCH_ERROR) -> None:
        super().__init__(message)


class ArticleSource(Protocol):
    """Interface for fetching a page of headlines."""

    async def fetch_page(self, category: str = "general", page: int = 1) -> list[Article]:
        """Fetch one page of articles.

        Args:
            category: News category, e.g. "general" or "technology".
            page: 1-based page number.

        Returns:
            Articles in the order the source returned them. May be empty.

        Raises:
            FetchFailure: On transport errors, non-2xx responses or a
                malformed response body.
        """
        ...
