"""Unit tests for the movie mutation guard."""

from __future__ import annotations

from movie_catalog.features.movies.models import Movie
from movie_catalog.features.movies.ownership import Allowed, Denied, authorize_mutation


class TestAuthorizeMutation:
    def test_creator_is_allowed(self):
        movie = Movie(title="Alpha", created_by_id=1)

        assert authorize_mutation(movie, 1) == Allowed()

    def test_anyone_else_is_denied(self):
        movie = Movie(title="Alpha", created_by_id=1)

        decision = authorize_mutation(movie, 2)

        assert isinstance(decision, Denied)
        assert decision.reason == "not authorized"
