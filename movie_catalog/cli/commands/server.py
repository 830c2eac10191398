"""Server command."""

from __future__ import annotations

import click
import uvicorn

from movie_catalog.cli.utils import info
from movie_catalog.core.settings import get_app_settings


@click.command(name="serve")
@click.option("--host", default=None, help="Host to bind (default: APP_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind (default: APP_PORT)")
@click.option("--reload/--no-reload", default=False, help="Auto-reload on code changes")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["critical", "error", "warning", "info", "debug"]),
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Run the API server."""
    settings = get_app_settings()
    host = host or settings.host
    port = port or settings.port

    info(f"Serving on http://{host}:{port} ({settings.environment})")
    uvicorn.run(
        "movie_catalog.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
