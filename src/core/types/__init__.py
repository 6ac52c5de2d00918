"""
Core type definitions and utilities.
"""

# Re-export arithmetic utilities for easy access
from .scaling import ScalingFactor, adjust_decimals, scaling_factor
from .wide_int import (
    checked_div,
    checked_mul,
    checked_pow10,
    is_unsigned,
    mul_div,
    narrow_to_u128,
    to_u256,
)

__all__ = [
    # Scaling
    "ScalingFactor",
    "scaling_factor",
    "adjust_decimals",
    # Checked arithmetic
    "is_unsigned",
    "to_u256",
    "checked_mul",
    "checked_div",
    "checked_pow10",
    "mul_div",
    "narrow_to_u128",
]
