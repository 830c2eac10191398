"""Release-day reminders for movie owners.

A reminder is stored when a movie is created with a future release date
and sent on that date by ``movie-catalog notify`` (run daily by an
external scheduler). With ``NOTIFICATION_DEV_MODE`` the reminder is sent
as soon as it is scheduled.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from movie_catalog.core.settings import get_notification_settings
from movie_catalog.features.movies.models import Movie, PendingNotification
from movie_catalog.features.movies.repository import MovieRepository, get_movie_repository
from movie_catalog.features.users.repository import UserRepository, get_user_repository
from movie_catalog.infra.email import EmailMessage, get_email_provider

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from movie_catalog.core.settings import NotificationSettings
    from movie_catalog.infra.email import BaseEmailProvider

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(UTC).date()


class ReleaseNotifier:
    """Schedules and sends release reminders.

    Sending never raises: a failed delivery is logged and the reminder
    stays unsent so the next run retries it.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        settings: NotificationSettings | None = None,
        email_provider: BaseEmailProvider | None = None,
        movies: MovieRepository | None = None,
        users: UserRepository | None = None,
    ) -> None:
        self._session = session
        self._settings = settings or get_notification_settings()
        self._email_provider = email_provider
        self._movies = movies or get_movie_repository()
        self._users = users or get_user_repository()

    @property
    def email_provider(self) -> BaseEmailProvider:
        if self._email_provider is None:
            self._email_provider = get_email_provider()
        return self._email_provider

    async def schedule(
        self,
        movie: Movie,
        *,
        today: date | None = None,
    ) -> PendingNotification | None:
        """Store a reminder for ``movie`` if it releases after ``today``."""
        if not self._settings.enabled or movie.release_date is None:
            return None
        if movie.release_date <= (today or _today()):
            return None

        notification = PendingNotification(
            movie_id=movie.id,
            notification_date=movie.release_date,
            notification_sent=False,
        )
        self._session.add(notification)
        await self._session.flush()

        logger.info(
            "Release notification scheduled",
            extra={"movie_id": movie.id, "notification_date": movie.release_date.isoformat()},
        )

        if self._settings.dev_mode:
            logger.info("Sending release notification immediately", extra={"movie_id": movie.id})
            await self._deliver(notification, movie)
        return notification

    async def send_due(self, today: date | None = None) -> int:
        """Send unsent reminders dated on or before ``today``.

        Returns:
            Number of reminders delivered
        """
        today = today or _today()
        due = await self._movies.due_notifications(
            self._session,
            today,
            limit=self._settings.batch_size,
        )
        logger.info(
            "Found due release notifications",
            extra={"count": len(due), "today": today.isoformat()},
        )

        sent = 0
        for notification in due:
            if await self._deliver(notification, notification.movie):
                sent += 1
        return sent

    async def _deliver(self, notification: PendingNotification, movie: Movie) -> bool:
        owner = await self._users.get(self._session, movie.created_by_id)
        if owner is None:
            logger.warning(
                "Missing owner for release notification",
                extra={"notification_id": notification.id, "movie_id": movie.id},
            )
            return False

        message = EmailMessage(
            to=[owner.email],
            subject=f"Releasing today: {movie.title}",
            body_text=(
                f"Hi {owner.name},\n\n"
                f"{movie.title} is released on {movie.release_date:%Y-%m-%d}.\n"
            ),
        )
        try:
            result = await self.email_provider.send(message)
        except Exception:
            logger.exception(
                "Release notification delivery raised",
                extra={"notification_id": notification.id, "movie_id": movie.id},
            )
            return False

        if not result.success:
            return False

        notification.notification_sent = True
        await self._session.flush()
        logger.info(
            "Release notification sent",
            extra={"notification_id": notification.id, "movie_id": movie.id},
        )
        return True


__all__ = ["ReleaseNotifier"]
