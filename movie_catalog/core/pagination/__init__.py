"""Cursor-based (keyset) pagination.

Listings return a ``Connection`` whose edges carry opaque cursors. Clients
pass ``page_info.end_cursor`` back as ``after`` to fetch the next page.
Seeking by key instead of OFFSET keeps pages stable when rows are inserted
between requests.
"""

from movie_catalog.core.pagination.cursor import CursorCodec, KeysetBound
from movie_catalog.core.pagination.filters import KeysetFilter
from movie_catalog.core.pagination.schemas import Connection, Edge, PageInfo

__all__ = [
    "Connection",
    "CursorCodec",
    "Edge",
    "KeysetBound",
    "KeysetFilter",
    "PageInfo",
]
