"""Main CLI entry point for movie-catalog management commands."""

from __future__ import annotations

import click

from movie_catalog import __version__
from movie_catalog.cli.commands.database import init_db
from movie_catalog.cli.commands.notifications import notify
from movie_catalog.cli.commands.server import serve
from movie_catalog.cli.commands.users import create_user
from movie_catalog.core.settings import get_logging_settings
from movie_catalog.infra.logging import setup_logging, shutdown


@click.group()
@click.version_option(version=__version__, prog_name="movie-catalog")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Movie catalog management commands.

    \b
    Quick Start:
      movie-catalog init-db                 # Create tables
      movie-catalog create-user --name Ana --email ana@example.com
      movie-catalog serve                   # Run the API
      movie-catalog notify                  # Send today's release reminders
    """
    ctx.ensure_object(dict)
    if ctx.invoked_subcommand != "serve":
        setup_logging(get_logging_settings())
        ctx.call_on_close(shutdown)


cli.add_command(serve)
cli.add_command(init_db)
cli.add_command(notify)
cli.add_command(create_user)


if __name__ == "__main__":
    cli()
