"""
Conversion engine for token pair amounts.

Converts amounts between the input and output token of a rate descriptor
using checked 256-bit intermediate arithmetic:

1. Decimal adjustment into the target token's precision (floors when dividing)
2. Rate application, floor(adjusted * numerator / denominator)
3. Narrowing back to the 128-bit amount type

The human-readable rate is computed separately with Decimal and never feeds
the integer path.
"""

from decimal import Decimal, localcontext

from src.core.constants import HUMAN_RATE_PRECISION
from src.core.protocols import IRateDescriptor, RateRatio
from src.core.types.scaling import scaling_factor
from src.core.types.wide_int import mul_div, narrow_to_u128
from src.core.utils.validation import validate_amount


def _convert(
    amount: int,
    from_decimals: int,
    to_decimals: int,
    multiplier: int,
    divisor: int,
) -> int:
    """Run the scale, rate and narrow pipeline for one direction."""
    if amount == 0:
        return 0

    adjusted = scaling_factor(from_decimals, to_decimals).apply(amount)
    converted = mul_div(adjusted, multiplier, divisor)
    return narrow_to_u128(converted)


def calculate_output_amount(descriptor: IRateDescriptor, input_amount: int) -> int:
    """Calculate the output amount received for an input amount.

    Args:
        descriptor: Validated rate descriptor
        input_amount: Amount in the input token's smallest units

    Returns:
        Output amount in the output token's smallest units, floored

    Raises:
        InvalidAmountError: If input_amount is not an unsigned 128-bit integer
        ArithmeticOverflowError: If an intermediate value exceeds 256 bits
        ResultOutOfRangeError: If the result exceeds the 128-bit amount type
        DivisionByZeroError: If rate_in is zero

    Examples:
        >>> d = RateDescriptor(("A", "B"), rate=(10, 19), decimals=(24, 24))
        >>> calculate_output_amount(d, 10**24)
        1900000000000000000000000
    """
    amount = validate_amount(input_amount, "input_amount")
    rate_in, rate_out = descriptor.rate
    decimals_in, decimals_out = descriptor.decimals
    return _convert(amount, decimals_in, decimals_out, rate_out, rate_in)


def calculate_input_amount(descriptor: IRateDescriptor, output_amount: int) -> int:
    """Calculate the input amount needed for a desired output amount.

    Mirrors calculate_output_amount with the rate and scaling direction
    swapped. Converting forward then back is not guaranteed to return the
    original amount when either direction floors.

    Args:
        descriptor: Validated rate descriptor
        output_amount: Amount in the output token's smallest units

    Returns:
        Input amount in the input token's smallest units, floored

    Raises:
        InvalidAmountError: If output_amount is not an unsigned 128-bit integer
        ArithmeticOverflowError: If an intermediate value exceeds 256 bits
        ResultOutOfRangeError: If the result exceeds the 128-bit amount type
        DivisionByZeroError: If rate_out is zero
    """
    amount = validate_amount(output_amount, "output_amount")
    rate_in, rate_out = descriptor.rate
    decimals_in, decimals_out = descriptor.decimals
    return _convert(amount, decimals_out, decimals_in, rate_in, rate_out)


def get_price_rate(descriptor: IRateDescriptor) -> RateRatio:
    """Return the exact (rate_in, rate_out) ratio as stored."""
    return descriptor.rate


def get_human_readable_rate(
    descriptor: IRateDescriptor, per_smallest_unit: bool = False
) -> Decimal:
    """Approximate rate_out / rate_in for display.

    The plain rate is the number of whole output tokens per whole input token.

    Args:
        descriptor: Validated rate descriptor
        per_smallest_unit: Express the rate as output smallest units per input
            smallest unit, i.e. scaled by 10**(decimals_out - decimals_in)

    Returns:
        Rate rounded to HUMAN_RATE_PRECISION significant digits

    Examples:
        >>> get_human_readable_rate(RateDescriptor(("A", "B"), rate=(2, 5), decimals=(18, 18)))
        Decimal('2.5')
    """
    rate_in, rate_out = descriptor.rate
    decimals_in, decimals_out = descriptor.decimals

    with localcontext() as ctx:
        ctx.prec = HUMAN_RATE_PRECISION
        rate = Decimal(rate_out) / Decimal(rate_in)
        if per_smallest_unit:
            rate = rate.scaleb(decimals_out - decimals_in)
        return +rate
