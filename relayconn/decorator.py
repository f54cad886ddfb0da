import functools
import inspect
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from ._logging import logger
from .arguments import ConnectionArguments, validate_args
from .config import ConnectionOptions, validate_config
from .exceptions import ConfigurationError, PaginationError
from .pagination import Connection, to_connection

FetchResult = Iterable[Any] | None | Awaitable[Iterable[Any] | None]
FetchFunction = Callable[[Any, Any, Any, Any], FetchResult]
ConnectionResolver = Callable[..., Awaitable[Connection[Any, Any]]]


class ConnectionDecorator:
    """
    Turns a fetch function into a connection resolver.

    Holds validated ConnectionOptions and is stateless otherwise, so a single
    instance can decorate any number of fetch functions.

    Usage:
        paginated = make_connection(max_limit=50)

        @paginated
        async def things(root, args, context, info):
            return await load_things()

        # Per-resolver cursor functions
        @paginated(to_cursor=lambda node, args, index: node["id"])
        def other_things(root, args, context, info):
            return OTHER_THINGS
    """

    def __init__(self, options: ConnectionOptions) -> None:
        self.options = options

    def __call__(
        self,
        fetch: FetchFunction | None = None,
        *,
        to_cursor: Callable[..., str] | None = None,
        validate_cursor: Callable[[Any], bool] | None = None,
    ) -> Any:
        options = self.options.replace(to_cursor=to_cursor, validate_cursor=validate_cursor)

        if fetch is None:
            return ConnectionDecorator(options)

        if not callable(fetch):
            raise ConfigurationError(
                option="fetch", message="The connection fetch function must be callable."
            )

        return _wrap(fetch, options)


def _wrap(fetch: FetchFunction, options: ConnectionOptions) -> ConnectionResolver:
    resolver_name = getattr(fetch, "__qualname__", repr(fetch))

    @functools.wraps(fetch)
    async def resolver(
        root: Any,
        args: ConnectionArguments | Mapping[str, Any] | None = None,
        context: Any = None,
        info: Any = None,
    ) -> Connection[Any, Any]:
        try:
            connection_args = ConnectionArguments.from_value(args)
            validate_args(options, connection_args)

            try:
                items = fetch(root, args, context, info)
                if inspect.isawaitable(items):
                    items = await items
            except PaginationError:
                raise
            except Exception:
                logger.exception(
                    "Connection fetch function failed", extra={"resolver": resolver_name}
                )
                raise

            connection = to_connection(
                root,
                items,
                connection_args,
                to_cursor=options.to_cursor,
                get_total_count=options.get_total_count,
            )
            # Resolve cursors now so a bad cursor fails this call, not a later read
            page_info = connection.page_info
        except PaginationError as e:
            logger.warning(
                "Connection request rejected",
                extra={"resolver": resolver_name, "kind": e.kind.value},
            )
            raise

        logger.info(
            "Resolved connection",
            extra={
                "resolver": resolver_name,
                "item_count": len(connection.items),
                "edge_count": len(connection.edges),
                "has_next_page": page_info.has_next_page,
                "has_previous_page": page_info.has_previous_page,
            },
        )
        return connection

    return resolver


def make_connection(**options: Any) -> ConnectionDecorator:
    """
    Creates a connection decorator.

    The options are validated immediately; invalid options raise here and
    never at request time.

    Args:
        max_limit: Largest accepted `first`/`last` (default 100)
        pagination_required: Reject requests without `first` or `last` (default False)
        disable_backwards_pagination: Reject `last` (default False)
        to_cursor: Cursor function, to_cursor(node, args, index) -> str
        validate_cursor: Cursor syntax check, validate_cursor(cursor) -> bool
        get_total_count: Total count function, get_total_count(root, items, args) -> int

    Raises:
        ConfigurationError: If an option is unknown or invalid
    """
    return ConnectionDecorator(validate_config(**options))


connection = make_connection()
