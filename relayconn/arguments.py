from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ._logging import logger, redact_cursor
from .exceptions import (
    ConflictingArgumentsError,
    InvalidArgumentError,
    LimitExceededError,
    PaginationRequiredError,
    UnsupportedDirectionError,
)

if TYPE_CHECKING:
    from .config import ConnectionOptions

ARGUMENT_NAMES = ("first", "last", "after", "before")


@dataclass(frozen=True)
class ConnectionArguments:
    """
    The four Relay pagination arguments of one request.

    Values are stored as received; absent and None both mean "not provided".
    Type checking is the job of `validate_args`.
    """

    first: Any = None
    last: Any = None
    after: Any = None
    before: Any = None

    @classmethod
    def from_value(
        cls, value: "ConnectionArguments | Mapping[str, Any] | None"
    ) -> "ConnectionArguments":
        """
        Normalizes resolver arguments.

        Accepts None, an existing ConnectionArguments, or a mapping such as the
        keyword arguments a GraphQL resolver receives. Keys other than the four
        pagination arguments are ignored.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(**{name: value.get(name) for name in ARGUMENT_NAMES})
        raise TypeError(
            f"Connection arguments must be a mapping or ConnectionArguments, "
            f"got {type(value).__name__}"
        )

    @property
    def has_first(self) -> bool:
        return self.first is not None

    @property
    def has_last(self) -> bool:
        return self.last is not None

    @property
    def has_after(self) -> bool:
        return self.after is not None

    @property
    def has_before(self) -> bool:
        return self.before is not None


def _is_non_negative_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid page size
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_args(options: "ConnectionOptions", args: ConnectionArguments) -> None:
    """
    Checks pagination arguments against the connection options.

    Checks run in a fixed order and the first failure is raised:
    page sizes, first/last exclusivity, cursor syntax, required pagination,
    backwards pagination, then limits.

    Args:
        options: The connection's validated options
        args: The request's pagination arguments

    Raises:
        PaginationError: The subclass describing the first failed check
    """
    logger.debug(
        "Validating connection arguments",
        extra={
            "first": args.first,
            "last": args.last,
            "after_hash": redact_cursor(args.after),
            "before_hash": redact_cursor(args.before),
        },
    )

    if args.has_first and not _is_non_negative_int(args.first):
        raise InvalidArgumentError("first")

    if args.has_last and not _is_non_negative_int(args.last):
        raise InvalidArgumentError("last")

    if args.has_first and args.has_last:
        raise ConflictingArgumentsError()

    if args.has_after and not options.validate_cursor(args.after):
        raise InvalidArgumentError("after")

    if args.has_before and not options.validate_cursor(args.before):
        raise InvalidArgumentError("before")

    if options.pagination_required and not args.has_first and not args.has_last:
        raise PaginationRequiredError()

    if options.disable_backwards_pagination and args.has_last:
        raise UnsupportedDirectionError("last")

    if args.has_first and args.first > options.max_limit:
        raise LimitExceededError("first", limit=options.max_limit, requested=args.first)

    if args.has_last and args.last > options.max_limit:
        raise LimitExceededError("last", limit=options.max_limit, requested=args.last)
