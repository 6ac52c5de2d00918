"""
Pair quoting service.

This module wraps the conversion engine with logging for CLI and
application callers.
"""

from decimal import Decimal
from typing import Any

from loguru import logger

from src.core.enums import ScaleDirection
from src.core.models.conversion import (
    calculate_input_amount,
    calculate_output_amount,
    get_human_readable_rate,
)
from src.core.models.pair_config import PairRateConfig
from src.core.models.rate_descriptor import RateDescriptor
from src.core.types.scaling import scaling_factor
from src.core.utils.decorators import log_conversions


class PairQuoter:
    """Quotes conversions for a single rate descriptor."""

    def __init__(self, descriptor: RateDescriptor):
        self.descriptor = descriptor

        scale = scaling_factor(*descriptor.decimals)
        if ScaleDirection.is_lossy(scale.direction):
            logger.debug(
                f"{descriptor.input_token}->{descriptor.output_token} drops up to "
                f"{scale.power} decimal places on output quotes"
            )

    @classmethod
    def from_config(cls, config: PairRateConfig) -> "PairQuoter":
        """Create a quoter from a validated configuration."""
        return cls(config.to_descriptor())

    @log_conversions
    def quote_output(self, amount: int) -> int:
        """Output token amount received for an input token amount."""
        result = calculate_output_amount(self.descriptor, amount)
        self._warn_if_zero(amount, result, self.descriptor.output_token)
        return result

    @log_conversions
    def quote_input(self, amount: int) -> int:
        """Input token amount needed for an output token amount."""
        result = calculate_input_amount(self.descriptor, amount)
        self._warn_if_zero(amount, result, self.descriptor.input_token)
        return result

    def display_rate(self) -> str:
        """Rate formatted as '1 INPUT = x OUTPUT'."""
        rate: Decimal = get_human_readable_rate(self.descriptor)
        return f"1 {self.descriptor.input_token} = {rate:f} {self.descriptor.output_token}"

    def describe(self) -> dict[str, Any]:
        """Descriptor details plus the display rate."""
        return {
            **self.descriptor.to_dict(),
            "human_readable_rate": str(get_human_readable_rate(self.descriptor)),
        }

    @staticmethod
    def _warn_if_zero(amount: int, result: int, token: str) -> None:
        if amount > 0 and result == 0:
            logger.warning(f"Amount {amount} converts to zero {token}, increase the amount")
