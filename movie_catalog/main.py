"""ASGI entry point: ``uvicorn movie_catalog.main:app``."""

from movie_catalog.app.main import create_app

app = create_app()
