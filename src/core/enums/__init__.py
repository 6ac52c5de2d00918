"""
Core enumerations for the pair rate calculator.

This module provides centralized enumerations for domain concepts
like the direction of a decimal precision adjustment.
"""

from .scale_direction import ScaleDirection

__all__ = ["ScaleDirection"]
