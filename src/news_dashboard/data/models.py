"""Core data models for the news dashboard."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from enum import StrEnum

UNKNOWN_AUTHOR = "Unknown"


class Theme(StrEnum):
    """Display theme persisted between runs."""

    LIGHT = "light"
    DARK = "dark"


class FetchStatus(StrEnum):
    """Lifecycle of the dashboard's article fetch.

    ``idle`` until a signed-in user triggers a fetch, ``loading`` while the
    request is in flight, then exactly one of ``loaded``, ``empty`` (the
    source answered with zero articles) or ``errored``.
    """

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    ERRORED = "errored"


def _as_utc(value: date | datetime | None) -> datetime | None:
    """Normalise a date or datetime bound to an aware UTC datetime.

    Plain dates become midnight UTC; naive datetimes are assumed to be UTC.
    """
    if value is None:
        return None
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO 8601 timestamp such as ``2026-02-01T10:00:00Z``.

    Returns None for missing, non-string or unparsable values.
    """
    if not raw or not isinstance(raw, str):
        return None
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    return _as_utc(parsed)


@dataclass(frozen=True)
class User:
    """A signed-in user as reported by the session gateway."""

    uid: str
    email: str | None = None
    id_token: str | None = None


@dataclass(frozen=True)
class Article:
    """A single headline as received from an article source."""

    url: str
    title: str = ""
    author: str | None = None
    published_at: datetime | None = None
    source_name: str = ""
    description: str | None = None

    @property
    def author_label(self) -> str:
        """Author name used for matching and charts."""
        return self.author or UNKNOWN_AUTHOR


@dataclass(frozen=True)
class DateRange:
    """Inclusive publication-date bounds. A missing bound is unbounded."""

    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _as_utc(self.start))
        object.__setattr__(self, "end", _as_utc(self.end))

    @property
    def is_active(self) -> bool:
        return self.start is not None or self.end is not None

    def contains(self, moment: datetime | None) -> bool:
        """Whether ``moment`` falls inside the bounds (both ends inclusive)."""
        if not self.is_active:
            return True
        if moment is None:
            return False
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True


@dataclass(frozen=True)
class FilterCriteria:
    """User-supplied predicates applied to the article list.

    Empty strings and an unbounded date range disable their predicate.
    """

    search_text: str = ""
    author_substring: str = ""
    date_range: DateRange = field(default_factory=DateRange)

    @property
    def is_empty(self) -> bool:
        return not (self.search_text or self.author_substring or self.date_range.is_active)


@dataclass(frozen=True)
class AuthorHistogram:
    """Article counts per author, as index-aligned label/value sequences."""

    labels: tuple[str, ...] = ()
    values: tuple[int, ...] = ()

    def as_dict(self) -> dict[str, int]:
        return dict(zip(self.labels, self.values, strict=True))

    def __len__(self) -> int:
        return len(self.labels)
