"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

from typing import Any

from src.core.constants import MAX_DECIMAL_DIFF, MAX_DECIMALS, MAX_RATE
from src.core.exceptions.rates import (
    DecimalDiffTooLargeError,
    DecimalsOutOfRangeError,
    InvalidRateError,
    InvalidTokenPairError,
    RateOutOfRangeError,
)
from src.core.types.wide_int import to_u256


def validate_pair_shape(value: Any, param_name: str) -> tuple[Any, Any]:
    """Validate that a value is an ordered pair.

    Args:
        value: Tuple or list to validate
        param_name: Parameter name for error messages

    Returns:
        The pair as a tuple

    Raises:
        TypeError: If value is not a tuple or list of length 2
    """
    if not isinstance(value, tuple | list) or len(value) != 2:
        raise TypeError(f"{param_name} must be a pair of two values, got {value!r}")
    return tuple(value)  # type: ignore[return-value]


def validate_int_pair(value: Any, param_name: str) -> tuple[int, int]:
    """Validate that a value is a pair of plain integers.

    Raises:
        TypeError: If value is not a pair or a component is not an int
    """
    pair = validate_pair_shape(value, param_name)
    for component in pair:
        if not isinstance(component, int) or isinstance(component, bool):
            raise TypeError(
                f"{param_name} components must be int, got {type(component).__name__}"
            )
    return pair


def validate_rate(rate: tuple[int, int]) -> tuple[int, int]:
    """Validate a rate ratio.

    Args:
        rate: (rate_in, rate_out)

    Returns:
        The validated rate

    Raises:
        InvalidRateError: If a component is zero or negative
        RateOutOfRangeError: If a component exceeds MAX_RATE
    """
    if rate[0] <= 0 or rate[1] <= 0:
        raise InvalidRateError(rate)
    if rate[0] > MAX_RATE or rate[1] > MAX_RATE:
        raise RateOutOfRangeError(rate, MAX_RATE)
    return rate


def validate_decimals(decimals: tuple[int, int]) -> tuple[int, int]:
    """Validate a pair of token precisions.

    Args:
        decimals: (decimals_in, decimals_out)

    Returns:
        The validated decimals

    Raises:
        DecimalsOutOfRangeError: If a value is negative or exceeds MAX_DECIMALS
        DecimalDiffTooLargeError: If the values differ by more than MAX_DECIMAL_DIFF
    """
    if not all(0 <= value <= MAX_DECIMALS for value in decimals):
        raise DecimalsOutOfRangeError(decimals, MAX_DECIMALS)
    if abs(decimals[0] - decimals[1]) > MAX_DECIMAL_DIFF:
        raise DecimalDiffTooLargeError(decimals, MAX_DECIMAL_DIFF)
    return decimals


def validate_token_pair(token_pair: tuple[str, str]) -> tuple[str, str]:
    """Validate that both token identifiers are non-empty strings.

    Raises:
        InvalidTokenPairError: If an identifier is empty or not a string
    """
    if not all(isinstance(token, str) and token.strip() for token in token_pair):
        raise InvalidTokenPairError(token_pair)
    return token_pair


def validate_amount(amount: Any, param_name: str = "amount") -> int:
    """Validate that an amount is an unsigned 128-bit integer.

    Args:
        amount: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated amount

    Raises:
        InvalidAmountError: If amount is not an int in [0, U128_MAX]
    """
    return to_u256(amount, param_name)
