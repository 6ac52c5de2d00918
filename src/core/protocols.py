"""
Core type definitions and protocols.

This module defines shared types and protocols so the conversion engine
does not depend on the concrete descriptor model.
"""

from typing import Protocol

# Type aliases for commonly used types
TokenPair = tuple[str, str]
RateRatio = tuple[int, int]
DecimalsPair = tuple[int, int]


class IRateDescriptor(Protocol):
    """Protocol defining the interface for rate descriptor objects.

    This protocol breaks the dependency between RateDescriptor and the
    conversion engine while maintaining type safety.
    """

    @property
    def token_pair(self) -> TokenPair: ...

    @property
    def rate(self) -> RateRatio: ...

    @property
    def decimals(self) -> DecimalsPair: ...
