"""
Pricing infrastructure.

This module provides logged quoting on top of the pair rate conversion core.
"""

from .quoter import PairQuoter

__all__ = ["PairQuoter"]
