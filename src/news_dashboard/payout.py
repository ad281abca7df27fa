"""Payout bookkeeping: a per-article rate multiplied by the filtered count.

The rate is the only numeric value persisted between runs, stored as a
string under ``PAYOUT_RATE_KEY``.
"""

import logging
import math

from news_dashboard.preferences.base import PreferenceStore

logger = logging.getLogger(__name__)

PAYOUT_RATE_KEY = "payoutPerArticle"
DEFAULT_RATE = 0.0


def parse_rate(raw: str | None) -> float:
    """Coerce a stored rate string to a float.

    Missing, empty, non-numeric and non-finite values all become 0.
    """
    if raw is None or not raw.strip():
        return DEFAULT_RATE
    try:
        rate = float(raw)
    except ValueError:
        logger.debug(f"Ignoring malformed payout rate {raw!r}")
        return DEFAULT_RATE
    if not math.isfinite(rate):
        logger.debug(f"Ignoring non-finite payout rate {raw!r}")
        return DEFAULT_RATE
    return rate


def total_payout(rate: float, article_count: int) -> float:
    """Total payout for ``article_count`` articles at ``rate`` each."""
    return rate * article_count


def format_total(total: float) -> str:
    """Render a payout total with two decimals, e.g. ``10.00``."""
    return f"{total:.2f}"


def load_rate(store: PreferenceStore) -> float:
    """Restore the persisted rate, defaulting to 0."""
    return parse_rate(store.get_item(PAYOUT_RATE_KEY))


def save_rate(store: PreferenceStore, rate: float) -> None:
    store.set_item(PAYOUT_RATE_KEY, str(float(rate)))
