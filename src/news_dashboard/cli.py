"""CLI for the news dashboard."""

import argparse
import asyncio
import logging
import os
import sys
from datetime import date
from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

from news_dashboard.config import create_from_config, get_default_config_path, load_config
from news_dashboard.dashboard import Dashboard
from news_dashboard.data import DateRange, FilterCriteria, User
from news_dashboard.session import (
    AuthenticationError,
    FirebaseSessionGateway,
    InMemorySessionGateway,
    SessionGateway,
)

logger = logging.getLogger(__name__)

PASSWORD_ENV_VAR = "NEWS_DASHBOARD_PASSWORD"


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    search: str = ""
    author: str = ""
    from_date: date | None = None
    to_date: date | None = None
    rate: float | None = None
    email: str | None = None
    password: str | None = None
    toggle_theme: bool = False
    sign_out: bool = False
    report: bool = False
    report_dir: str = "reports"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @model_validator(mode="after")
    def dates_in_order(self) -> "CLIArgs":
        if self.from_date and self.to_date and self.from_date > self.to_date:
            raise ValueError(f"--from {self.from_date} is after --to {self.to_date}")
        return self


async def sign_in(session: SessionGateway, email: str, password: str | None) -> None:
    """Sign in through whichever gateway the config selected."""
    if isinstance(session, FirebaseSessionGateway):
        if not password:
            raise AuthenticationError(
                f"Password required. Pass --password or set {PASSWORD_ENV_VAR}."
            )
        await session.sign_in_with_password(email, password)
    elif isinstance(session, InMemorySessionGateway):
        session.sign_in(User(uid="local", email=email))
    else:
        raise AuthenticationError(f"Cannot sign in with {type(session).__name__}")


def show(dashboard: Dashboard) -> None:
    """Log the dashboard the way the web view lays it out."""
    user = dashboard.user
    logger.info(f"Welcome to your Dashboard{', ' + user.email if user and user.email else ''}!")
    logger.info(f"Theme: {dashboard.theme.value}")
    logger.info(f"Payout per article: {dashboard.payout_rate}")
    logger.info(f"Total Payout: ${dashboard.formatted_total}")

    if dashboard.status_message:
        logger.info(f"\n{dashboard.status_message}")
        return

    logger.info("\n--- Article Trends by Author ---")
    for label, value in zip(dashboard.histogram.labels, dashboard.histogram.values, strict=True):
        logger.info(f"{label}: {value}")

    print(f"\nShowing {len(dashboard.filtered_articles)} of {len(dashboard.articles)} articles:\n")
    for i, article in enumerate(dashboard.filtered_articles, 1):
        logger.info(f"{i}. {article.title}")
        logger.info(f"   Author: {article.author_label}")
        if article.published_at:
            logger.info(f"   Date: {article.published_at.date().isoformat()}")
        if article.source_name:
            logger.info(f"   Source: {article.source_name}")
        logger.info(f"   URL: {article.url}")


async def run(args: CLIArgs) -> int:
    """Mount the dashboard, apply the requested inputs and print the result.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    dashboard, session, report_writer = create_from_config(
        config,
        report_override=args.report if args.report else None,
        report_dir_override=args.report_dir if args.report_dir != "reports" else None,
    )

    async with dashboard:
        if args.email:
            await sign_in(session, args.email, args.password)

        if dashboard.login_required:
            logger.error("Not signed in. Pass --email to sign in.")
            return 1

        await dashboard.wait_until_loaded()

        if args.toggle_theme:
            dashboard.toggle_theme()
        if args.rate is not None:
            dashboard.set_payout_rate(args.rate)
        date_range = DateRange(start=args.from_date, end=args.to_date)  # type: ignore[arg-type]
        dashboard.set_criteria(
            FilterCriteria(
                search_text=args.search,
                author_substring=args.author,
                date_range=date_range,
            )
        )

        show(dashboard)

        if report_writer and report_writer.write(dashboard):
            logger.info(f"\nReport written to: {report_writer.last_report_path}")

        if args.sign_out:
            await dashboard.sign_out()
            logger.info("Signed out.")

    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse, filter and chart top headlines.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument("--search", default="", help="Only show titles containing this text")
    parser.add_argument("--author", default="", help="Only show authors containing this text")
    parser.add_argument("--from", dest="from_date", default=None, help="Earliest date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="to_date", default=None, help="Latest date (YYYY-MM-DD)")
    parser.add_argument("--rate", type=float, default=None, help="Set and save payout per article")
    parser.add_argument("--email", default=None, help="Sign in as this user")
    parser.add_argument(
        "--password",
        default=None,
        help=f"Password for --email (default: ${PASSWORD_ENV_VAR})",
    )
    parser.add_argument(
        "--toggle-theme",
        action="store_true",
        default=False,
        help="Switch between light and dark theme and save the choice",
    )
    parser.add_argument(
        "--sign-out",
        action="store_true",
        default=False,
        help="Sign out before exiting",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        default=False,
        help="Write a JSON snapshot of the dashboard",
    )
    parser.add_argument(
        "--report-dir",
        type=str,
        default="reports",
        help="Directory for report files (default: reports/)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    ns = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO, format="%(message)s")

    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            search=ns.search,
            author=ns.author,
            from_date=ns.from_date,
            to_date=ns.to_date,
            rate=ns.rate,
            email=ns.email,
            password=ns.password or os.environ.get(PASSWORD_ENV_VAR),
            toggle_theme=ns.toggle_theme,
            sign_out=ns.sign_out,
            report=ns.report,
            report_dir=ns.report_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        exit_code = asyncio.run(run(args))
    except AuthenticationError as e:
        logger.error(f"Sign-in failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
