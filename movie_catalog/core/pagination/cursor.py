"""Cursor tokens and keyset bounds.

A cursor names the last record a client has seen. It carries only that
record's primary key; the sort value used to seek past it is read back
from the database when the next page is requested, so cursors stay
valid if a client changes nothing but the page size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class KeysetBound:
    """Position to resume after: the sort value and the tiebreak key."""

    value: Any
    tiebreak: Any


class CursorCodec:
    """Encode and decode id cursors.

    Example:
        token = CursorCodec.encode(42)      # "42"
        CursorCodec.decode(token)           # 42
        CursorCodec.decode("garbage")       # None
    """

    @staticmethod
    def encode(identifier: int) -> str:
        return str(identifier)

    @staticmethod
    def decode(token: str | None) -> int | None:
        """Return the record id named by ``token``, or None if it names none.

        Malformed tokens are not an error: the caller treats them as
        "start from the beginning".
        """
        if not token:
            return None
        try:
            identifier = int(token.strip())
        except ValueError:
            return None
        return identifier if identifier > 0 else None


__all__ = ["CursorCodec", "KeysetBound"]
