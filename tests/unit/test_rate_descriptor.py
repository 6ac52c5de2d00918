"""
Unit tests for the RateDescriptor model.
Testing fail-fast validation in __post_init__ and the descriptor helpers.
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.constants import MAX_RATE, U128_MAX
from src.core.exceptions.rates import (
    DecimalDiffTooLargeError,
    DecimalsOutOfRangeError,
    InvalidRateError,
    InvalidTokenPairError,
    RateOutOfRangeError,
)
from src.core.models.rate_descriptor import RateDescriptor, construct, is_valid_rate

PAIR = ("TOKEN_A", "TOKEN_B")


class TestRateDescriptorCreation:
    """Test successful descriptor construction."""

    def test_should_create_valid_descriptor(self) -> None:
        """Test creating a valid RateDescriptor succeeds."""
        # Arrange & Act
        descriptor = RateDescriptor.create(PAIR, rate=(10, 19), decimals=(24, 18))

        # Assert
        assert descriptor.token_pair == PAIR
        assert descriptor.rate == (10, 19)
        assert descriptor.decimals == (24, 18)
        assert descriptor.input_token == "TOKEN_A"
        assert descriptor.output_token == "TOKEN_B"

    def test_should_normalise_lists_to_tuples(self) -> None:
        """Test that list inputs are stored as tuples."""
        descriptor = RateDescriptor(["A", "B"], [1, 2], [6, 18])  # type: ignore[arg-type]

        assert descriptor.token_pair == ("A", "B")
        assert descriptor.rate == (1, 2)
        assert descriptor.decimals == (6, 18)

    def test_should_build_same_descriptor_with_construct(self) -> None:
        """Test the module-level construct function."""
        assert construct(PAIR, (3, 5), (24, 18)) == RateDescriptor(PAIR, (3, 5), (24, 18))

    def test_should_be_immutable(self) -> None:
        """Test that fields cannot be reassigned."""
        descriptor = RateDescriptor.default()

        with pytest.raises(FrozenInstanceError):
            descriptor.rate = (2, 1)  # type: ignore[misc]

    def test_should_be_hashable_and_comparable(self) -> None:
        """Test value semantics."""
        a = RateDescriptor(PAIR, (1, 2), (18, 18))
        b = RateDescriptor(PAIR, (1, 2), (18, 18))

        assert a == b
        assert hash(a) == hash(b)
        assert a != RateDescriptor(PAIR, (2, 1), (18, 18))

    def test_should_create_default_descriptor(self) -> None:
        """Test default() values."""
        descriptor = RateDescriptor.default()

        assert descriptor.token_pair == ("TOKEN_A", "TOKEN_B")
        assert descriptor.rate == (1, 1)
        assert descriptor.decimals == (18, 18)


class TestRateValidation:
    """Test rate ratio validation."""

    @pytest.mark.parametrize("rate", [(0, 1), (1, 0), (0, 0), (0, MAX_RATE), (MAX_RATE, 0)])
    def test_should_reject_zero_rate_component(self, rate: tuple[int, int]) -> None:
        """Test that a zero rate component raises InvalidRateError."""
        with pytest.raises(InvalidRateError, match="Rate components must be greater than 0"):
            RateDescriptor(PAIR, rate, (18, 18))

    def test_should_reject_negative_rate_component(self) -> None:
        """Test that a negative rate component raises InvalidRateError."""
        with pytest.raises(InvalidRateError) as exc_info:
            RateDescriptor(PAIR, (-1, 5), (18, 18))

        assert exc_info.value.rate == (-1, 5)

    def test_should_accept_max_rate(self) -> None:
        """Test that MAX_RATE itself is allowed."""
        descriptor = RateDescriptor(PAIR, (MAX_RATE, MAX_RATE), (18, 18))

        assert descriptor.rate == (MAX_RATE, MAX_RATE)

    @pytest.mark.parametrize("rate", [(MAX_RATE + 1, 1), (1, MAX_RATE + 1), (1, U128_MAX)])
    def test_should_reject_rate_above_max(self, rate: tuple[int, int]) -> None:
        """Test that rate components above MAX_RATE raise RateOutOfRangeError."""
        with pytest.raises(RateOutOfRangeError) as exc_info:
            RateDescriptor(PAIR, rate, (18, 18))

        assert exc_info.value.max_rate == MAX_RATE


class TestDecimalsValidation:
    """Test decimal precision validation."""

    @pytest.mark.parametrize("decimals", [(40, 0), (0, 39), (39, 38), (-1, 0)])
    def test_should_reject_decimals_out_of_range(self, decimals: tuple[int, int]) -> None:
        """Test that decimals outside [0, MAX_DECIMALS] raise DecimalsOutOfRangeError."""
        with pytest.raises(DecimalsOutOfRangeError, match="Decimals must be between 0 and 38"):
            RateDescriptor(PAIR, (1, 1), decimals)

    def test_should_accept_max_decimals_on_both_sides(self) -> None:
        """Test (38, 38) is valid."""
        assert RateDescriptor(PAIR, (1, 1), (38, 38)).decimals == (38, 38)

    @pytest.mark.parametrize("decimals", [(38, 0), (0, 38), (33, 0), (0, 33), (38, 5)])
    def test_should_reject_decimal_difference_above_max(self, decimals: tuple[int, int]) -> None:
        """Test that a decimal difference above 32 raises DecimalDiffTooLargeError."""
        with pytest.raises(DecimalDiffTooLargeError) as exc_info:
            RateDescriptor(PAIR, (1, 1), decimals)

        assert exc_info.value.diff == abs(decimals[0] - decimals[1])
        assert exc_info.value.max_diff == 32

    @pytest.mark.parametrize("decimals", [(32, 0), (0, 32), (38, 6)])
    def test_should_accept_decimal_difference_at_boundary(self, decimals: tuple[int, int]) -> None:
        """Test that a difference of exactly 32 is allowed."""
        assert RateDescriptor(PAIR, (1, 1), decimals).decimals == decimals


class TestTokenPairValidation:
    """Test token label validation."""

    @pytest.mark.parametrize("token_pair", [("", "B"), ("A", ""), ("   ", "B"), (1, "B")])
    def test_should_reject_invalid_token_labels(self, token_pair: tuple) -> None:
        """Test that empty or non-string labels raise InvalidTokenPairError."""
        with pytest.raises(InvalidTokenPairError, match="Token identifiers must be non-empty"):
            RateDescriptor(token_pair, (1, 1), (18, 18))  # type: ignore[arg-type]

    def test_should_allow_identical_labels(self) -> None:
        """Test that the pair is not checked for distinct labels."""
        assert RateDescriptor(("A", "A"), (1, 1), (18, 18)).token_pair == ("A", "A")


class TestValidationShapeAndOrder:
    """Test structural checks and fail-fast ordering."""

    def test_should_raise_type_error_for_wrong_pair_length(self) -> None:
        """Test that a non-pair rate raises TypeError."""
        with pytest.raises(TypeError, match="rate must be a pair of two values"):
            RateDescriptor(PAIR, (1, 2, 3), (18, 18))  # type: ignore[arg-type]

    def test_should_raise_type_error_for_scalar_decimals(self) -> None:
        """Test that a scalar decimals value raises TypeError."""
        with pytest.raises(TypeError, match="decimals must be a pair of two values"):
            RateDescriptor(PAIR, (1, 2), 18)  # type: ignore[arg-type]

    @pytest.mark.parametrize("rate", [(1.0, 2), (1, "2"), (True, 1)])
    def test_should_raise_type_error_for_non_int_rate(self, rate: tuple) -> None:
        """Test that float, str and bool components raise TypeError."""
        with pytest.raises(TypeError, match="rate components must be int"):
            RateDescriptor(PAIR, rate, (18, 18))  # type: ignore[arg-type]

    def test_should_report_invalid_rate_before_everything_else(self) -> None:
        """Test that InvalidRateError wins over later violations."""
        with pytest.raises(InvalidRateError):
            RateDescriptor(("", ""), (0, MAX_RATE + 1), (40, 0))

    def test_should_report_rate_range_before_decimals(self) -> None:
        """Test that RateOutOfRangeError wins over decimals violations."""
        with pytest.raises(RateOutOfRangeError):
            RateDescriptor(PAIR, (MAX_RATE + 1, 1), (40, 0))

    def test_should_report_decimals_range_before_difference(self) -> None:
        """Test that DecimalsOutOfRangeError wins over the difference check."""
        with pytest.raises(DecimalsOutOfRangeError):
            RateDescriptor(("", "B"), (1, 1), (40, 0))

    def test_should_report_decimal_difference_before_token_labels(self) -> None:
        """Test that DecimalDiffTooLargeError wins over token label violations."""
        with pytest.raises(DecimalDiffTooLargeError):
            RateDescriptor(("", "B"), (1, 1), (38, 0))


class TestDescriptorHelpers:
    """Test reversed, reduced and serialisation helpers."""

    def test_should_reverse_pair_rate_and_decimals(self) -> None:
        """Test reversed() swaps every field."""
        descriptor = RateDescriptor(("WETH", "USDC"), (1, 3000), (18, 6))

        # Act
        reversed_descriptor = descriptor.reversed()

        # Assert
        assert reversed_descriptor.token_pair == ("USDC", "WETH")
        assert reversed_descriptor.rate == (3000, 1)
        assert reversed_descriptor.decimals == (6, 18)
        assert reversed_descriptor.reversed() == descriptor

    def test_should_reduce_rate_by_gcd(self) -> None:
        """Test reduced() simplifies the ratio."""
        descriptor = RateDescriptor(PAIR, (6, 10), (18, 18))

        assert descriptor.reduced().rate == (3, 5)
        assert RateDescriptor(PAIR, (3, 5), (18, 18)).reduced().rate == (3, 5)

    def test_should_convert_identically_after_reduction(self) -> None:
        """Test that reducing the ratio does not change conversions."""
        descriptor = RateDescriptor(PAIR, (20, 38), (24, 24))
        reduced = descriptor.reduced()

        for amount in (1, 7, 10**24, 123_456_789_012_345_678_901):
            assert reduced.calculate_output_amount(amount) == descriptor.calculate_output_amount(
                amount
            )

    def test_should_convert_to_dict(self) -> None:
        """Test to_dict."""
        descriptor = RateDescriptor(("WETH", "USDC"), (1, 3000), (18, 6))

        assert descriptor.to_dict() == {
            "input_token": "WETH",
            "output_token": "USDC",
            "rate_in": 1,
            "rate_out": 3000,
            "decimals_in": 18,
            "decimals_out": 6,
        }

    def test_should_check_rate_validity_without_raising(self) -> None:
        """Test is_valid_rate predicate."""
        assert is_valid_rate((1, 1)) is True
        assert is_valid_rate((2, 5)) is True
        assert is_valid_rate((0, 1)) is False
        assert is_valid_rate((1, -1)) is False
        assert is_valid_rate((1.5, 1)) is False
        assert is_valid_rate("1:1") is False
