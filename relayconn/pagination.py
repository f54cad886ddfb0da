"""
Connection building for Relay-style cursor pagination.

This module turns an already materialized sequence of nodes into a Connection:
the page of edges selected by `first`/`last`/`after`/`before`, the bare nodes
of that page, its PageInfo and the total count.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ._logging import logger, redact_cursor
from .arguments import ConnectionArguments
from .config import default_get_total_count
from .cursor import default_to_cursor
from .exceptions import CursorNotFoundError

R = TypeVar("R")
N = TypeVar("N")

ToCursorFunction = Callable[[Any, ConnectionArguments, int], str]
GetTotalCountFunction = Callable[[Any, list[Any], ConnectionArguments], int]


@dataclass(frozen=True)
class Edge(Generic[R, N]):
    """
    A node paired with its cursor.

    Attributes:
        cursor: Opaque cursor identifying the node within this connection
        node: The item itself
        root: The root value the connection was resolved for
    """

    cursor: str
    node: N
    root: R


class PageInfo(BaseModel):
    """Boundary metadata for one page, following the Relay PageInfo shape."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    has_next_page: bool
    has_previous_page: bool
    start_cursor: str | None = None
    end_cursor: str | None = None


@dataclass(frozen=True)
class _Window:
    """Result of the windowing pass. Offsets are indexes into the full edge list."""

    edges: list[Edge[Any, Any]]
    start_boundary: int
    end_boundary: int
    window_start: int
    window_end: int


def _find_cursor(edges: Sequence[Edge[Any, Any]], cursor: str) -> int | None:
    return next((index for index, edge in enumerate(edges) if edge.cursor == cursor), None)


class Connection(Generic[R, N]):
    """
    A paginated view over a sequence of nodes.

    Nothing is computed until one of `edges`, `nodes` or `page_info` is read.
    The first read runs the windowing pass, which computes every cursor once,
    resolves `after`/`before` and slices the page; later reads reuse it and
    return the very same objects.

    Raises:
        CursorNotFoundError: On the first read of `edges`, `nodes` or `page_info`
            when `after` or `before` matches no item.
    """

    def __init__(
        self,
        root: R,
        items: Iterable[N] | None,
        args: ConnectionArguments | Mapping[str, Any] | None = None,
        to_cursor: ToCursorFunction = default_to_cursor,
        get_total_count: GetTotalCountFunction = default_get_total_count,
    ) -> None:
        self.root = root
        self.items: list[N] = (
            [] if items is None else items if isinstance(items, list) else list(items)
        )
        self.args = ConnectionArguments.from_value(args)
        self._to_cursor = to_cursor
        self._get_total_count = get_total_count

    def __repr__(self) -> str:
        return f"<Connection items={len(self.items)} args={self.args!r}>"

    @cached_property
    def _window(self) -> _Window:
        args = self.args

        # 1. Materialize every edge once; cursor lookups search this list
        all_edges = [
            Edge(cursor=str(self._to_cursor(node, args, index)), node=node, root=self.root)
            for index, node in enumerate(self.items)
        ]

        # 2. Resolve the cursors into boundaries [start_boundary, end_boundary)
        start_boundary = 0
        end_boundary = len(all_edges)

        if args.has_after:
            after_index = _find_cursor(all_edges, args.after)
            if after_index is None:
                logger.debug(
                    "Cursor not found",
                    extra={"argument": "after", "cursor_hash": redact_cursor(args.after)},
                )
                raise CursorNotFoundError("after", args.after)
            start_boundary = after_index + 1

        if args.has_before:
            before_index = _find_cursor(all_edges, args.before)
            if before_index is None:
                logger.debug(
                    "Cursor not found",
                    extra={"argument": "before", "cursor_hash": redact_cursor(args.before)},
                )
                raise CursorNotFoundError("before", args.before)
            end_boundary = before_index

        # `before` at or ahead of `after` leaves nothing between them
        if end_boundary < start_boundary:
            end_boundary = start_boundary

        # 3. Apply the page size
        if args.has_first:
            window_start = start_boundary
            window_end = min(end_boundary, start_boundary + args.first)
        elif args.has_last:
            window_start = max(start_boundary, end_boundary - args.last)
            window_end = end_boundary
        else:
            window_start = start_boundary
            window_end = end_boundary

        logger.debug(
            "Computed connection window",
            extra={
                "item_count": len(all_edges),
                "start_boundary": start_boundary,
                "end_boundary": end_boundary,
                "window_start": window_start,
                "window_end": window_end,
            },
        )

        return _Window(
            edges=all_edges[window_start:window_end],
            start_boundary=start_boundary,
            end_boundary=end_boundary,
            window_start=window_start,
            window_end=window_end,
        )

    @cached_property
    def edges(self) -> list[Edge[R, N]]:
        """The edges of the current page, in sequence order."""
        return self._window.edges

    @cached_property
    def nodes(self) -> list[N]:
        """The nodes of the current page, without edge wrappers."""
        return [edge.node for edge in self.edges]

    @cached_property
    def page_info(self) -> PageInfo:
        window = self._window
        edges = window.edges
        has_edges = len(edges) > 0

        return PageInfo(
            has_next_page=(
                not self.args.has_last and has_edges and window.window_end < window.end_boundary
            ),
            has_previous_page=(
                not self.args.has_first
                and has_edges
                and window.window_start > window.start_boundary
            ),
            start_cursor=edges[0].cursor if has_edges else None,
            end_cursor=edges[-1].cursor if has_edges else None,
        )

    @cached_property
    def total_count(self) -> int:
        """
        Number of items in the whole sequence, not just the current page.
        Uses the configured `get_total_count` when one is provided.
        """
        return self._get_total_count(self.root, self.items, self.args)

    def to_dict(self, by_alias: bool = True) -> dict[str, Any]:
        """
        Renders the connection as plain data for a transport layer.

        Edges are rendered as {"cursor", "node"}; the root back-reference is
        left out. With `by_alias` the keys use the Relay camelCase names.
        """
        page_info_key, total_count_key = (
            ("pageInfo", "totalCount") if by_alias else ("page_info", "total_count")
        )
        return {
            "edges": [{"cursor": edge.cursor, "node": edge.node} for edge in self.edges],
            "nodes": list(self.nodes),
            page_info_key: self.page_info.model_dump(by_alias=by_alias),
            total_count_key: self.total_count,
        }


def to_connection(
    root: R,
    items: Iterable[N] | None,
    args: ConnectionArguments | Mapping[str, Any] | None = None,
    to_cursor: ToCursorFunction = default_to_cursor,
    get_total_count: GetTotalCountFunction = default_get_total_count,
) -> Connection[R, N]:
    """
    Builds a Connection over `items`.

    The arguments are not validated here; call `validate_args` first, or use
    `make_connection` which does both.

    Args:
        root: Root value, stored on every edge
        items: The full, ordered sequence of nodes (None means empty)
        args: Pagination arguments
        to_cursor: Cursor function, called as to_cursor(node, args, index)
        get_total_count: Total count function, called as get_total_count(root, items, args)

    Returns:
        A lazily evaluated Connection. Cursors are always strings: whatever
        `to_cursor` returns is passed through str().
    """
    return Connection(
        root, items, args, to_cursor=to_cursor, get_total_count=get_total_count
    )
