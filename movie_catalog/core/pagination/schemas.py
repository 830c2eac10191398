"""Connection-style pagination response schemas.

Follows the Relay connection shape: a list of edges (node plus cursor),
page navigation metadata, and the total size of the filtered set.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Navigation metadata for one page.

    Attributes:
        has_previous_page: Whether the page was requested with a cursor
        has_next_page: Whether rows exist after this page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
    """

    has_previous_page: bool = Field(description="Whether previous items exist")
    has_next_page: bool = Field(description="Whether more items exist")
    start_cursor: str | None = Field(default=None, description="Cursor of the first item")
    end_cursor: str | None = Field(default=None, description="Cursor of the last item")


class Edge(BaseModel, Generic[T]):
    """A single item and the cursor that resumes after it."""

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")


class Connection(BaseModel, Generic[T]):
    """One page of a cursor-paginated listing.

    Client navigation:
        GET /movies?first=10
        GET /movies?first=10&after=<page_info.end_cursor>

    Attributes:
        edges: Items with their cursors, in listing order
        page_info: Navigation metadata
        total_count: Number of items matching the filters, ignoring paging
    """

    edges: list[Edge[T]] = Field(default_factory=list, description="Items with cursors")
    page_info: PageInfo = Field(description="Pagination metadata")
    total_count: int = Field(default=0, ge=0, description="Size of the filtered set")

    @property
    def nodes(self) -> list[T]:
        return [edge.node for edge in self.edges]

    def map_nodes(self, transform: Callable[[Any], Any]) -> Connection[Any]:
        """Return a copy whose nodes are ``transform(node)``.

        Used to turn ORM rows into response schemas while keeping cursors
        and page info untouched.
        """
        return Connection(
            edges=[Edge(node=transform(edge.node), cursor=edge.cursor) for edge in self.edges],
            page_info=self.page_info,
            total_count=self.total_count,
        )


__all__ = ["Connection", "Edge", "PageInfo"]
