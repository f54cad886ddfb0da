from .arguments import ConnectionArguments, validate_args
from .config import ConnectionOptions, validate_config
from .cursor import (
    array_to_cursor,
    cursor_to_offset,
    default_to_cursor,
    default_validate_cursor,
    offset_to_cursor,
    validate_array_cursor,
)
from .decorator import ConnectionDecorator, connection, make_connection
from .exceptions import (
    ConfigurationError,
    ConflictingArgumentsError,
    CursorNotFoundError,
    InvalidArgumentError,
    LimitExceededError,
    PaginationError,
    PaginationErrorKind,
    PaginationRequiredError,
    RelayConnError,
    UnsupportedDirectionError,
)
from .pagination import Connection, Edge, PageInfo, to_connection

__all__ = [
    "make_connection",
    "connection",
    "ConnectionDecorator",
    "to_connection",
    "Connection",
    "Edge",
    "PageInfo",
    "ConnectionArguments",
    "ConnectionOptions",
    "validate_args",
    "validate_config",
    # Cursors
    "default_to_cursor",
    "default_validate_cursor",
    "offset_to_cursor",
    "cursor_to_offset",
    "array_to_cursor",
    "validate_array_cursor",
    # Exceptions
    "RelayConnError",
    "ConfigurationError",
    "PaginationError",
    "PaginationErrorKind",
    "InvalidArgumentError",
    "ConflictingArgumentsError",
    "PaginationRequiredError",
    "UnsupportedDirectionError",
    "LimitExceededError",
    "CursorNotFoundError",
]
