"""
Unit tests for connection options.

Tests the ConnectionOptions model and the construction-time checks done
by validate_config.
"""

import pytest

from relayconn.config import (
    DEFAULT_MAX_LIMIT,
    ConnectionOptions,
    default_get_total_count,
    validate_config,
)
from relayconn.cursor import array_to_cursor, default_to_cursor, default_validate_cursor
from relayconn.exceptions import ConfigurationError, RelayConnError


@pytest.mark.unit
class TestConnectionOptions:
    """Test ConnectionOptions defaults and immutability."""

    def test_defaults(self) -> None:
        options = validate_config()

        assert options.max_limit == DEFAULT_MAX_LIMIT == 100
        assert options.pagination_required is False
        assert options.disable_backwards_pagination is False
        assert options.to_cursor is default_to_cursor
        assert options.validate_cursor is default_validate_cursor
        assert options.get_total_count is default_get_total_count

    def test_custom_values(self) -> None:
        def count(root, items, args):
            return 99

        options = validate_config(
            max_limit=5,
            pagination_required=True,
            disable_backwards_pagination=True,
            to_cursor=array_to_cursor,
            get_total_count=count,
        )

        assert options.max_limit == 5
        assert options.pagination_required is True
        assert options.disable_backwards_pagination is True
        assert options.to_cursor is array_to_cursor
        assert options.get_total_count is count

    def test_zero_max_limit_is_allowed(self) -> None:
        assert validate_config(max_limit=0).max_limit == 0

    def test_options_are_frozen(self) -> None:
        options = validate_config()
        with pytest.raises(Exception):
            options.max_limit = 5  # type: ignore[misc]

    def test_replace_returns_validated_copy(self) -> None:
        options = validate_config(max_limit=10)
        replaced = options.replace(to_cursor=array_to_cursor)

        assert replaced is not options
        assert replaced.to_cursor is array_to_cursor
        assert replaced.max_limit == 10
        assert options.to_cursor is default_to_cursor

    def test_replace_ignores_none(self) -> None:
        options = validate_config()
        assert options.replace(to_cursor=None, validate_cursor=None) is options

    def test_replace_rejects_invalid_override(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config().replace(validate_cursor="not callable")
        assert exc_info.value.option == "validate_cursor"

    def test_as_kwargs_round_trips(self) -> None:
        options = validate_config(max_limit=7)
        assert ConnectionOptions(**options.as_kwargs()) == options


@pytest.mark.unit
class TestValidateConfig:
    """Test configuration error reporting."""

    @pytest.mark.parametrize("value", [-1, 1.5, "10", None, True])
    def test_invalid_max_limit(self, value) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(max_limit=value)

        error = exc_info.value
        assert error.option == "max_limit"
        assert error.message == 'Configuration option "max_limit" must be a non-negative integer.'
        assert error.original_error is not None

    @pytest.mark.parametrize("option", ["pagination_required", "disable_backwards_pagination"])
    @pytest.mark.parametrize("value", ["yes", 1, None])
    def test_invalid_boolean_flags(self, option, value) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(**{option: value})

        assert exc_info.value.option == option
        assert str(exc_info.value) == f'Configuration option "{option}" must be a boolean.'

    @pytest.mark.parametrize("option", ["to_cursor", "validate_cursor", "get_total_count"])
    def test_non_callable_functions(self, option) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(**{option: "not a function"})

        assert exc_info.value.option == option
        assert str(exc_info.value) == f'Configuration option "{option}" must be a function.'

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(maxLimit=10)

        assert exc_info.value.option == "maxLimit"
        assert "Unknown configuration option" in str(exc_info.value)

    def test_configuration_error_is_relayconn_error(self) -> None:
        with pytest.raises(RelayConnError):
            validate_config(max_limit=-5)
