"""Dashboard view model: session-driven fetch plus filter, chart and payout state."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from datetime import date, datetime
from types import TracebackType

from news_dashboard.analytics import author_histogram
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
from news_dashboard.payout import format_total, load_rate, parse_rate, save_rate, total_payout
from news_dashboard.preferences.base import PreferenceStore
from news_dashboard.session.base import SessionGateway, Unsubscribe
from news_dashboard.source.base import ArticleSource, FetchFailure

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
NO_ARTICLES_MESSAGE = "No articles found."
LOADING_MESSAGE = "Loading..."


class Dashboard:
    """State behind the news dashboard view.

    Use as an async context manager: entering subscribes to the session
    gateway and exiting unsubscribes, whatever happens inside the block.
    Entering also restores the saved theme and payout rate. When the
    gateway reports a signed-in user, page 1 of the configured category is
    fetched in the background.

    Every input handler recomputes the filtered list, the author histogram
    and the payout total before returning, so readers never see a total that
    lags behind the filters or the rate.

    Args:
        source: Where articles come from.
        preferences: Persistent store for the payout rate and theme.
        session: Identity provider gateway.
        category: News category to fetch.
    """

    def __init__(
        self,
        source: ArticleSource,
        preferences: PreferenceStore,
        session: SessionGateway,
        *,
        category: str = "general",
    ) -> None:
        self._source = source
        self._preferences = preferences
        self._session = session
        self._category = category

        self._unsubscribe: Unsubscribe | None = None
        self._fetch_task: asyncio.Task[None] | None = None

        self._user: User | None = None
        self._login_required = False
        self._articles: list[Article] = []
        self._filtered: list[Article] = []
        self._histogram = AuthorHistogram()
        self._criteria = FilterCriteria()
        self._rate = 0.0
        self._total = 0.0
        self._status = FetchStatus.IDLE
        self._error_message = ""
        self._theme = Theme.LIGHT

    async def __aenter__(self) -> Dashboard:
        self._theme = self._load_theme()
        self._rate = load_rate(self._preferences)
        self._refresh()
        self._unsubscribe = self._session.subscribe(self._on_session_change)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        task = self._fetch_task
        self._fetch_task = None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def login_required(self) -> bool:
        """True once the session gateway reports that nobody is signed in."""
        return self._login_required

    @property
    def articles(self) -> tuple[Article, ...]:
        return tuple(self._articles)

    @property
    def filtered_articles(self) -> tuple[Article, ...]:
        return tuple(self._filtered)

    @property
    def histogram(self) -> AuthorHistogram:
        return self._histogram

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def payout_rate(self) -> float:
        return self._rate

    @property
    def total_payout(self) -> float:
        return self._total

    @property
    def formatted_total(self) -> str:
        return format_total(self._total)

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status is FetchStatus.LOADING

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def status_message(self) -> str | None:
        """Text to show in place of the article list, if any."""
        if self._error_message:
            return self._error_message
        if self.loading:
            return LOADING_MESSAGE
        if self._status is FetchStatus.LOADED and not self._filtered:
            return NO_ARTICLES_MESSAGE
        return None

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def load_news(self) -> None:
        """Fetch page 1 and replace the article set.

        Failures never propagate: they clear the articles and set
        ``error_message``. An empty page is reported as "No articles found."
        with status ``empty``.
        """
        self._status = FetchStatus.LOADING
        self._error_message = ""
        try:
            articles = await self._source.fetch_page(self._category, page=1)
        except FetchFailure as e:
            logger.warning(f"Failed to load news: {e}")
            self._articles = []
            self._error_message = str(e)
            self._status = FetchStatus.ERRORED
        else:
            self._articles = list(articles)
            if self._articles:
                self._error_message = ""
                self._status = FetchStatus.LOADED
            else:
                self._error_message = NO_ARTICLES_MESSAGE
                self._status = FetchStatus.EMPTY
            logger.debug(f"Loaded {len(self._articles)} articles for {self._category!r}")
        self._refresh()

    async def wait_until_loaded(self) -> None:
        """Wait for the in-flight fetch, if any, to finish."""
        if self._fetch_task is not None:
            await asyncio.shield(self._fetch_task)

    async def reload(self) -> None:
        """Fetch again, joining the current fetch if one is in flight."""
        await asyncio.shield(self._start_fetch())

    def _start_fetch(self) -> asyncio.Task[None]:
        if self._fetch_task is None or self._fetch_task.done():
            self._fetch_task = asyncio.get_running_loop().create_task(self.load_news())
        return self._fetch_task

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def _on_session_change(self, user: User | None) -> None:
        if user is None:
            self._user = None
            self._login_required = True
            return

        self._user = user
        self._login_required = False
        self._start_fetch()

    async def sign_out(self) -> None:
        await self._session.sign_out()

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------

    def set_criteria(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria
        self._refresh()

    def set_search(self, text: str) -> None:
        self.set_criteria(
            FilterCriteria(
                search_text=text,
                author_substring=self._criteria.author_substring,
                date_range=self._criteria.date_range,
            )
        )

    def set_author_filter(self, text: str) -> None:
        self.set_criteria(
            FilterCriteria(
                search_text=self._criteria.search_text,
                author_substring=text,
                date_range=self._criteria.date_range,
            )
        )

    def set_date_range(
        self,
        start: date | datetime | None = None,
        end: date | datetime | None = None,
    ) -> None:
        self.set_criteria(
            FilterCriteria(
                search_text=self._criteria.search_text,
                author_substring=self._criteria.author_substring,
                date_range=DateRange(start=start, end=end),  # type: ignore[arg-type]
            )
        )

    def clear_filters(self) -> None:
        self.set_criteria(FilterCriteria())

    def set_payout_rate(self, rate: float | str) -> None:
        """Update the per-article payout rate and persist it.

        Strings are parsed the way stored values are, so form input that is
        empty or not a number becomes 0. The total is recomputed before
        the store is written.
        """
        self._rate = parse_rate(rate) if isinstance(rate, str) else float(rate)
        self._refresh()
        save_rate(self._preferences, self._rate)

    def toggle_theme(self) -> Theme:
        self._theme = Theme.LIGHT if self._theme is Theme.DARK else Theme.DARK
        self._preferences.set_item(THEME_KEY, self._theme.value)
        return self._theme

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_theme(self) -> Theme:
        raw = self._preferences.get_item(THEME_KEY)
        return Theme.DARK if raw == Theme.DARK.value else Theme.LIGHT

    def _refresh(self) -> None:
        self._filtered = filter_articles(self._articles, self._criteria)
        self._histogram = author_histogram(self._filtered)
        self._total = total_payout(self._rate, len(self._filtered))
