"""Command line interface (``movie-catalog``)."""
