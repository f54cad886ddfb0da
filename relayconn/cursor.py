"""
Cursor encoding for connections.

A cursor is an opaque string identifying an item's position within one
connection. The defaults here use the item's offset in the sequence; any
function with the same signature can be configured instead, as long as it
is deterministic and yields distinct cursors for distinct items.
"""

import base64
import binascii
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .arguments import ConnectionArguments

ARRAY_CURSOR_PREFIX = "arrayconnection:"


def default_to_cursor(node: Any, args: "ConnectionArguments", index: int) -> str:
    """Returns the item's offset as a decimal string ("0", "1", ...)."""
    return str(index)


def default_validate_cursor(cursor: Any) -> bool:
    """Accepts any non-empty string."""
    return isinstance(cursor, str) and len(cursor) > 0


def offset_to_cursor(offset: int) -> str:
    """
    Creates an opaque cursor from an offset.

    The token is base64("arrayconnection:<offset>"), the format used by the
    reference Relay array connection helpers.
    """
    return base64.b64encode(f"{ARRAY_CURSOR_PREFIX}{offset}".encode()).decode("ascii")


def cursor_to_offset(cursor: str) -> int | None:
    """
    Extracts the offset from a cursor created by `offset_to_cursor`.

    Returns None when the cursor was not produced by `offset_to_cursor`.
    """
    try:
        decoded = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, AttributeError):
        return None
    if not decoded.startswith(ARRAY_CURSOR_PREFIX):
        return None
    raw_offset = decoded[len(ARRAY_CURSOR_PREFIX) :]
    if not (raw_offset.isascii() and raw_offset.isdigit()):
        return None
    return int(raw_offset)


def array_to_cursor(node: Any, args: "ConnectionArguments", index: int) -> str:
    """A `to_cursor` function producing opaque offset cursors."""
    return offset_to_cursor(index)


def validate_array_cursor(cursor: Any) -> bool:
    """A `validate_cursor` function matching `array_to_cursor`."""
    return isinstance(cursor, str) and cursor_to_offset(cursor) is not None
