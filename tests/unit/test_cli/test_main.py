"""Unit tests for the management CLI."""

from __future__ import annotations

from click.testing import CliRunner

from movie_catalog import __version__
from movie_catalog.cli.main import cli
from movie_catalog.cli.utils import coro


class TestCli:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_commands_are_registered(self):
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("serve", "init-db", "notify", "create-user"):
            assert command in result.output


class TestCoro:
    def test_runs_coroutine(self):
        @coro
        async def add(a: int, b: int) -> int:
            return a + b

        assert add(2, 3) == 5
