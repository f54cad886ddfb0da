from enum import Enum
from typing import Any

PAGINATION_ERROR_CODE = "RELAY_PAGINATION_ERROR"


class RelayConnError(Exception):
    """Base exception for all relayconn errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(RelayConnError):
    """
    Raised when a connection is built with invalid options.

    This is a programming mistake on the caller's side and is only ever raised
    while constructing a connection decorator, never while resolving a request.
    """

    def __init__(
        self, option: str, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)
        self.option = option


class PaginationErrorKind(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONFLICTING_ARGUMENTS = "CONFLICTING_ARGUMENTS"
    PAGINATION_REQUIRED = "PAGINATION_REQUIRED"
    UNSUPPORTED_DIRECTION = "UNSUPPORTED_DIRECTION"
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"
    CURSOR_NOT_FOUND = "CURSOR_NOT_FOUND"


class PaginationError(RelayConnError):
    """
    Base class for request-time pagination errors.

    These are user input errors. The transport layer is expected to turn them
    into a client-facing error, using `message` verbatim and `extensions`
    as machine-readable details.
    """

    kind: PaginationErrorKind
    code = PAGINATION_ERROR_CODE

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.details = details

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "kind": self.kind.value, **self.details}


class InvalidArgumentError(PaginationError):
    """Raised when `first`, `last`, `after` or `before` is malformed."""

    kind = PaginationErrorKind.INVALID_ARGUMENT

    def __init__(self, argument: str, message: str | None = None) -> None:
        if message is None:
            if argument in ("first", "last"):
                message = f'Argument "{argument}" must be a non-negative integer.'
            else:
                message = f'Argument "{argument}" is invalid.'
        super().__init__(message, argument=argument)
        self.argument = argument


class ConflictingArgumentsError(PaginationError):
    """Raised when both `first` and `last` are supplied."""

    kind = PaginationErrorKind.CONFLICTING_ARGUMENTS

    def __init__(self) -> None:
        super().__init__(
            'Passing both "first" and "last" to paginate the connection is not supported.'
        )


class PaginationRequiredError(PaginationError):
    """Raised when pagination is mandatory and neither `first` nor `last` is given."""

    kind = PaginationErrorKind.PAGINATION_REQUIRED

    def __init__(self) -> None:
        super().__init__(
            "You must provide a `first` or `last` value to properly paginate the connection."
        )


class UnsupportedDirectionError(PaginationError):
    """Raised when `last` is used on a connection with backwards pagination disabled."""

    kind = PaginationErrorKind.UNSUPPORTED_DIRECTION

    def __init__(self, argument: str = "last") -> None:
        super().__init__(
            f'Argument "{argument}" is not supported: '
            "backwards pagination is disabled for this connection.",
            argument=argument,
        )
        self.argument = argument


class LimitExceededError(PaginationError):
    """Raised when the requested page size is above the configured maximum."""

    kind = PaginationErrorKind.LIMIT_EXCEEDED

    def __init__(self, argument: str, limit: int, requested: int) -> None:
        super().__init__(
            f"Requesting {requested} records on the connection exceeds "
            f'the "{argument}" limit of {limit} records.',
            argument=argument,
            limit=limit,
            requested=requested,
        )
        self.argument = argument
        self.limit = limit
        self.requested = requested


class CursorNotFoundError(PaginationError):
    """Raised when `after` or `before` does not match any item of the sequence."""

    kind = PaginationErrorKind.CURSOR_NOT_FOUND

    def __init__(self, argument: str, cursor: str) -> None:
        super().__init__(
            f'No record found for the provided "{argument}" cursor: "{cursor}".',
            argument=argument,
            cursor=cursor,
        )
        self.argument = argument
        self.cursor = cursor
