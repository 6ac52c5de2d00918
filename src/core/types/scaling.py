"""
Decimal precision scaling between two tokens.

An amount expressed in one token's smallest units is moved into another
token's granularity by multiplying or dividing by a power of ten. Dividing
floors the result, so smallest units below the target precision are dropped.
"""

from dataclasses import dataclass

from src.core.enums import ScaleDirection
from src.core.types.wide_int import checked_div, checked_mul, checked_pow10


@dataclass(frozen=True)
class ScalingFactor:
    """Power-of-ten adjustment between two decimal precisions."""

    direction: ScaleDirection
    power: int

    @property
    def factor(self) -> int:
        """The multiplier or divisor, 10**power."""
        return checked_pow10(self.power)

    def apply(self, amount: int) -> int:
        """Apply the adjustment to an accumulator value.

        Args:
            amount: Amount in the source token's smallest units

        Returns:
            Amount in the target token's smallest units (floored when dividing)

        Raises:
            ArithmeticOverflowError: If multiplying exceeds the accumulator
        """
        if self.direction == ScaleDirection.MULTIPLY:
            return checked_mul(amount, self.factor)
        if self.direction == ScaleDirection.DIVIDE:
            return checked_div(amount, self.factor)
        return amount


def scaling_factor(decimals_a: int, decimals_b: int) -> ScalingFactor:
    """Compute the adjustment that expresses token A amounts in token B units.

    Args:
        decimals_a: Decimals of the source token
        decimals_b: Decimals of the target token

    Returns:
        ScalingFactor with direction and power = |decimals_a - decimals_b|

    Examples:
        >>> scaling_factor(18, 6)
        ScalingFactor(direction=<ScaleDirection.DIVIDE: 'divide'>, power=12)
        >>> scaling_factor(6, 6).power
        0
    """
    return ScalingFactor(
        direction=ScaleDirection.between(decimals_a, decimals_b),
        power=abs(decimals_a - decimals_b),
    )


def adjust_decimals(amount: int, from_decimals: int, to_decimals: int) -> int:
    """Move an amount from one decimal precision to another.

    Args:
        amount: Amount in from_decimals smallest units
        from_decimals: Source precision
        to_decimals: Target precision

    Returns:
        Amount in to_decimals smallest units

    Examples:
        >>> adjust_decimals(10**24, 24, 18)
        1000000000000000000
        >>> adjust_decimals(1_999_999, 6, 0)
        1
    """
    return scaling_factor(from_decimals, to_decimals).apply(amount)
