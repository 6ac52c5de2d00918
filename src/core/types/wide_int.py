"""
Checked fixed-width integer arithmetic for amount conversions.

Python integers never wrap, so the fixed-width behaviour of the conversion
pipeline is reproduced with explicit bounds checks instead:

- Amounts are unsigned 128-bit values (0 to U128_MAX)
- Intermediate products live in an unsigned 256-bit accumulator
- Every step that can grow a value is checked against the accumulator bound
- Results are narrowed back to 128 bits before they leave the pipeline

A step that would exceed its bound raises instead of returning a wrapped or
clamped value.
"""

from src.core.constants import MAX_DECIMAL_DIFF, U128_MAX, U256_MAX
from src.core.exceptions.rates import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InvalidAmountError,
    ResultOutOfRangeError,
)

# Powers of ten used for decimal scaling, indexed by exponent
_POW10 = tuple(10**exponent for exponent in range(MAX_DECIMAL_DIFF + 1))


def is_unsigned(value: object, max_value: int = U128_MAX) -> bool:
    """Check that a value is a plain int within [0, max_value].

    Args:
        value: Value to check
        max_value: Inclusive upper bound (default: U128_MAX)

    Returns:
        True if value is a non-bool int inside the range

    Examples:
        >>> is_unsigned(0)
        True
        >>> is_unsigned(-1)
        False
        >>> is_unsigned(True)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= max_value


def to_u256(value: int, param_name: str = "amount") -> int:
    """Widen a 128-bit amount into the accumulator.

    Args:
        value: Amount to widen
        param_name: Parameter name for error messages

    Returns:
        The same value, validated

    Raises:
        InvalidAmountError: If value is not an unsigned 128-bit integer
    """
    if not is_unsigned(value, U128_MAX):
        raise InvalidAmountError(value, param_name)
    return value


def checked_mul(a: int, b: int, bound: int = U256_MAX) -> int:
    """Multiply two accumulator values.

    Args:
        a: Left operand
        b: Right operand
        bound: Inclusive upper bound of the result (default: U256_MAX)

    Returns:
        The product

    Raises:
        ArithmeticOverflowError: If the product exceeds bound

    Examples:
        >>> checked_mul(10, 19)
        190
    """
    result = a * b
    if result > bound:
        raise ArithmeticOverflowError("multiplication", bound)
    return result


def checked_div(numerator: int, denominator: int) -> int:
    """Floor-divide two accumulator values.

    Raises:
        DivisionByZeroError: If denominator is zero
    """
    if denominator == 0:
        raise DivisionByZeroError("checked_div")
    return numerator // denominator


def checked_pow10(exponent: int) -> int:
    """Return 10**exponent for a validated scaling exponent.

    Args:
        exponent: Power of ten, between 0 and MAX_DECIMAL_DIFF

    Returns:
        10 raised to exponent

    Raises:
        ArithmeticOverflowError: If exponent is outside the supported range
    """
    if not 0 <= exponent <= MAX_DECIMAL_DIFF:
        raise ArithmeticOverflowError(f"10**{exponent}", U128_MAX)
    return _POW10[exponent]


def mul_div(amount: int, multiplier: int, divisor: int) -> int:
    """Compute floor(amount * multiplier / divisor) in the 256-bit accumulator.

    Args:
        amount: Accumulator value
        multiplier: Rate component applied as numerator
        divisor: Rate component applied as denominator

    Returns:
        The floored quotient, still in accumulator width

    Raises:
        DivisionByZeroError: If divisor is zero
        ArithmeticOverflowError: If amount * multiplier exceeds U256_MAX
    """
    # Zero divisor takes precedence over overflow
    if divisor == 0:
        raise DivisionByZeroError("rate division")
    product = checked_mul(amount, multiplier)
    return checked_div(product, divisor)


def narrow_to_u128(value: int) -> int:
    """Narrow an accumulator value back to the amount type.

    Raises:
        ResultOutOfRangeError: If value exceeds U128_MAX
    """
    if value > U128_MAX:
        raise ResultOutOfRangeError(value, U128_MAX)
    return value
