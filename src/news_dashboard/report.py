"""Report writer for saving a snapshot of the dashboard view to JSON."""

import dataclasses
from datetime import UTC, date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from news_dashboard.dashboard import Dashboard
from news_dashboard.data import AuthorHistogram


class HistogramRecord(BaseModel):
    """Chart data as parallel label/value lists."""

    labels: list[str] = []
    values: list[int] = []


class DashboardReport(BaseModel):
    """Snapshot of everything the dashboard currently shows."""

    generated_at: str
    user: dict[str, Any] | None = None
    status: str
    error_message: str = ""
    theme: str
    criteria: dict[str, Any]
    article_count: int = 0
    filtered_count: int = 0
    payout_rate: float = 0.0
    total_payout: float = 0.0
    histogram: HistogramRecord = HistogramRecord()
    articles: list[dict[str, Any]] = []


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, datetimes, paths, lists,
    dicts and primitives. ID tokens on users are dropped.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime | date):
        return obj.isoformat()
    if isinstance(obj, AuthorHistogram):
        return {"labels": list(obj.labels), "values": list(obj.values)}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: _serialize(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
            if f.name != "id_token"
        }
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


def build_report(dashboard: Dashboard) -> DashboardReport:
    """Capture the dashboard's current state."""
    return DashboardReport(
        generated_at=datetime.now(tz=UTC).isoformat(),
        user=_serialize(dashboard.user),
        status=dashboard.status.value,
        error_message=dashboard.error_message,
        theme=dashboard.theme.value,
        criteria=_serialize(dashboard.criteria),
        article_count=len(dashboard.articles),
        filtered_count=len(dashboard.filtered_articles),
        payout_rate=dashboard.payout_rate,
        total_payout=dashboard.total_payout,
        histogram=HistogramRecord(**_serialize(dashboard.histogram)),
        articles=_serialize(dashboard.filtered_articles),
    )


class ReportWriter:
    """Writes dashboard snapshots as JSON files, one per call.

    When ``enabled=False``, ``write`` is a no-op.

    Args:
        report_dir: Directory to write JSON reports.
        enabled: If False, nothing is written.
    """

    def __init__(self, report_dir: Path, *, enabled: bool = True) -> None:
        self._report_dir = report_dir
        self._enabled = enabled
        self._last_report_path: Path | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def last_report_path(self) -> Path | None:
        """Path to the last written report, or None."""
        return self._last_report_path

    def write(self, dashboard: Dashboard) -> Path | None:
        """Write a snapshot of ``dashboard``.

        Returns:
            Path to the written JSON file, or None if reporting is disabled.
        """
        if not self._enabled:
            return None

        report = build_report(dashboard)
        self._report_dir.mkdir(parents=True, exist_ok=True)

        # report_2026-02-12T14-30-00.json (colons → dashes)
        ts = report.generated_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._report_dir / f"report_{ts}.json"

        filepath.write_text(report.model_dump_json(indent=2))
        self._last_report_path = filepath
        return filepath
