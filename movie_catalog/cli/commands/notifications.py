"""Release notification commands."""

from __future__ import annotations

from datetime import date, datetime

import click

from movie_catalog.cli.utils import coro, info, success
from movie_catalog.features.movies.notifications import ReleaseNotifier
from movie_catalog.infra.database import close_database, get_async_session


@click.command(name="notify")
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Send reminders due on or before this date (default: today, UTC)",
)
@coro
async def notify(today: datetime | None) -> None:
    """Send due release-day reminders.

    Meant to be run once a day by cron or a similar scheduler.
    """
    run_date: date | None = today.date() if today is not None else None
    try:
        async with get_async_session() as session:
            sent = await ReleaseNotifier(session).send_due(run_date)
            await session.commit()
    finally:
        await close_database()

    if sent:
        success(f"Sent {sent} release notification(s)")
    else:
        info("No release notifications due")
