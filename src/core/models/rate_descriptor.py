"""
Rate descriptor domain model.

A RateDescriptor pins down one direction of a token pair: which token is the
input, which is the output, the exchange ratio between them and the decimal
precision of each. It is validated once on construction and is immutable.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from src.core.constants import (
    DEFAULT_DECIMALS,
    DEFAULT_INPUT_TOKEN,
    DEFAULT_OUTPUT_TOKEN,
    DEFAULT_RATE,
)
from src.core.models import conversion
from src.core.protocols import DecimalsPair, RateRatio, TokenPair
from src.core.utils.validation import (
    validate_decimals,
    validate_int_pair,
    validate_pair_shape,
    validate_rate,
    validate_token_pair,
)


@dataclass(frozen=True)
class RateDescriptor:
    """Immutable exchange rate between an input and an output token.

    rate = (rate_in, rate_out) means rate_in whole input tokens are worth
    rate_out whole output tokens. decimals = (decimals_in, decimals_out)
    defines each token's smallest unit.
    """

    token_pair: TokenPair
    rate: RateRatio
    decimals: DecimalsPair

    def __post_init__(self) -> None:
        """Validate descriptor data after initialization."""
        token_pair = validate_pair_shape(self.token_pair, "token_pair")
        rate = validate_int_pair(self.rate, "rate")
        decimals = validate_int_pair(self.decimals, "decimals")

        # Order matters: the first violation wins
        validate_rate(rate)
        validate_decimals(decimals)
        validate_token_pair(token_pair)

        object.__setattr__(self, "token_pair", token_pair)
        object.__setattr__(self, "rate", rate)
        object.__setattr__(self, "decimals", decimals)

    @property
    def input_token(self) -> str:
        return self.token_pair[0]

    @property
    def output_token(self) -> str:
        return self.token_pair[1]

    @classmethod
    def create(
        cls, token_pair: TokenPair, rate: RateRatio, decimals: DecimalsPair
    ) -> "RateDescriptor":
        """Factory method to build a validated descriptor.

        Args:
            token_pair: (input token, output token) labels
            rate: (rate_in, rate_out), both positive and at most MAX_RATE
            decimals: (decimals_in, decimals_out), each at most MAX_DECIMALS

        Returns:
            New RateDescriptor instance

        Raises:
            InvalidRateError: If a rate component is zero
            RateOutOfRangeError: If a rate component exceeds MAX_RATE
            DecimalsOutOfRangeError: If a decimals value exceeds MAX_DECIMALS
            DecimalDiffTooLargeError: If decimals differ by more than MAX_DECIMAL_DIFF
            InvalidTokenPairError: If a token label is empty
        """
        return cls(token_pair=token_pair, rate=rate, decimals=decimals)

    @classmethod
    def default(cls) -> "RateDescriptor":
        """Descriptor for a 1:1 pair of two 18-decimal tokens."""
        return cls(
            token_pair=(DEFAULT_INPUT_TOKEN, DEFAULT_OUTPUT_TOKEN),
            rate=DEFAULT_RATE,
            decimals=DEFAULT_DECIMALS,
        )

    def reversed(self) -> "RateDescriptor":
        """Descriptor for the opposite direction of the same pair."""
        return RateDescriptor(
            token_pair=(self.token_pair[1], self.token_pair[0]),
            rate=(self.rate[1], self.rate[0]),
            decimals=(self.decimals[1], self.decimals[0]),
        )

    def reduced(self) -> "RateDescriptor":
        """Descriptor with the rate ratio divided by its greatest common divisor."""
        divisor = math.gcd(*self.rate)
        return RateDescriptor(
            token_pair=self.token_pair,
            rate=(self.rate[0] // divisor, self.rate[1] // divisor),
            decimals=self.decimals,
        )

    def calculate_output_amount(self, input_amount: int) -> int:
        """Output amount for an input amount, see conversion.calculate_output_amount."""
        return conversion.calculate_output_amount(self, input_amount)

    def calculate_input_amount(self, output_amount: int) -> int:
        """Input amount for an output amount, see conversion.calculate_input_amount."""
        return conversion.calculate_input_amount(self, output_amount)

    def get_price_rate(self) -> RateRatio:
        return conversion.get_price_rate(self)

    def get_human_readable_rate(self, per_smallest_unit: bool = False) -> Decimal:
        return conversion.get_human_readable_rate(self, per_smallest_unit)

    def to_dict(self) -> dict[str, Any]:
        """Convert descriptor to dictionary."""
        return {
            "input_token": self.input_token,
            "output_token": self.output_token,
            "rate_in": self.rate[0],
            "rate_out": self.rate[1],
            "decimals_in": self.decimals[0],
            "decimals_out": self.decimals[1],
        }


def construct(token_pair: TokenPair, rate: RateRatio, decimals: DecimalsPair) -> RateDescriptor:
    """Build a validated RateDescriptor, see RateDescriptor.create."""
    return RateDescriptor.create(token_pair, rate, decimals)


def is_valid_rate(rate: Any) -> bool:
    """Check whether a rate ratio has two positive integer components.

    Unlike construction this never raises and ignores the MAX_RATE bound.
    """
    try:
        validate_int_pair(rate, "rate")
    except TypeError:
        return False
    return rate[0] > 0 and rate[1] > 0
