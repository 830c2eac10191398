"""Who may change a movie.

Only the user recorded as a movie's creator may update or delete it. The
check is a plain comparison so it can be tested without a database.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from movie_catalog.features.movies.models import Movie


@dataclass(slots=True, frozen=True)
class Allowed:
    pass


@dataclass(slots=True, frozen=True)
class Denied:
    reason: str = "not authorized"


type Decision = Allowed | Denied


def authorize_mutation(movie: Movie, acting_user_id: int) -> Decision:
    """Allow the change only if ``acting_user_id`` created ``movie``."""
    if movie.created_by_id == acting_user_id:
        return Allowed()
    return Denied()


__all__ = ["Allowed", "Decision", "Denied", "authorize_mutation"]
