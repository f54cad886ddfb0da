from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic import ValidationError as PydanticValidationError

from ._logging import logger
from .cursor import default_to_cursor, default_validate_cursor
from .exceptions import ConfigurationError

DEFAULT_MAX_LIMIT = 100


def default_get_total_count(root: Any, items: Sequence[Any], args: Any) -> int:
    """Counts every item the fetch function returned, not just the current page."""
    return len(items)


class ConnectionOptions(BaseModel):
    """
    Immutable configuration shared by every request a connection serves.

    Built once through `validate_config` (or `make_connection`) and then
    read concurrently by any number of resolver calls.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_limit: StrictInt = Field(default=DEFAULT_MAX_LIMIT, ge=0)
    pagination_required: StrictBool = False
    disable_backwards_pagination: StrictBool = False
    to_cursor: Callable[..., str] = default_to_cursor
    validate_cursor: Callable[[Any], bool] = default_validate_cursor
    get_total_count: Callable[..., int] = default_get_total_count

    def as_kwargs(self) -> dict[str, Any]:
        """Returns the options as keyword arguments, callables included."""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def replace(self, **overrides: Any) -> "ConnectionOptions":
        """
        Returns a validated copy with some options replaced.
        Options passed as None keep their current value.
        """
        updates = {name: value for name, value in overrides.items() if value is not None}
        if not updates:
            return self
        return validate_config(**{**self.as_kwargs(), **updates})


_OPTION_REQUIREMENTS = {
    "max_limit": "must be a non-negative integer",
    "pagination_required": "must be a boolean",
    "disable_backwards_pagination": "must be a boolean",
    "to_cursor": "must be a function",
    "validate_cursor": "must be a function",
    "get_total_count": "must be a function",
}


def validate_config(**options: Any) -> ConnectionOptions:
    """
    Validates connection options and returns them as a ConnectionOptions.

    Raises:
        ConfigurationError: If an option is unknown or has the wrong type.
            Only the first offending option is reported.
    """
    try:
        config = ConnectionOptions(**options)
    except PydanticValidationError as e:
        first_error = e.errors()[0]
        option = str(first_error["loc"][0]) if first_error["loc"] else "<unknown>"

        if first_error["type"] == "extra_forbidden":
            message = f'Unknown configuration option "{option}".'
        else:
            requirement = _OPTION_REQUIREMENTS.get(option, "is invalid")
            message = f'Configuration option "{option}" {requirement}.'

        raise ConfigurationError(option=option, message=message, original_error=e) from e

    logger.debug(
        "Connection options validated",
        extra={
            "max_limit": config.max_limit,
            "pagination_required": config.pagination_required,
            "disable_backwards_pagination": config.disable_backwards_pagination,
        },
    )
    return config
