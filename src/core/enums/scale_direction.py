"""
Decimal scaling direction enumeration.

This module defines how an amount moves between two token precisions.
"""

from enum import StrEnum


class ScaleDirection(StrEnum):
    """
    Direction of a decimal precision adjustment.

    MULTIPLY widens the amount into a finer-grained token, DIVIDE narrows it
    into a coarser one and truncates the dropped smallest units.
    """

    NONE = "none"  # Equal precisions, amount unchanged
    MULTIPLY = "multiply"  # Target has more decimals
    DIVIDE = "divide"  # Target has fewer decimals (lossy)

    @classmethod
    def between(cls, from_decimals: int, to_decimals: int) -> "ScaleDirection":
        """
        Get the direction needed to move from one precision to another.

        Args:
            from_decimals: Decimals of the source token
            to_decimals: Decimals of the target token

        Returns:
            Corresponding ScaleDirection enum value
        """
        if to_decimals > from_decimals:
            return cls.MULTIPLY
        if to_decimals < from_decimals:
            return cls.DIVIDE
        return cls.NONE

    @classmethod
    def is_lossy(cls, direction: "ScaleDirection") -> bool:
        """
        Check whether scaling in a direction can drop smallest units.

        Args:
            direction: Scale direction enum value

        Returns:
            True for DIVIDE, False otherwise
        """
        return direction == cls.DIVIDE
