"""
Unit tests for decimal precision scaling.
"""

import pytest

from src.core.constants import MAX_DECIMAL_DIFF, U256_MAX
from src.core.enums import ScaleDirection
from src.core.exceptions.rates import ArithmeticOverflowError
from src.core.types.scaling import ScalingFactor, adjust_decimals, scaling_factor


class TestScaleDirectionEnum:
    """Tests for ScaleDirection enum."""

    def test_should_have_correct_values(self) -> None:
        """Test that ScaleDirection enum has correct values."""
        assert ScaleDirection.NONE.value == "none"
        assert ScaleDirection.MULTIPLY.value == "multiply"
        assert ScaleDirection.DIVIDE.value == "divide"

    def test_should_pick_direction_between_precisions(self) -> None:
        """Test between() for all three orderings."""
        assert ScaleDirection.between(6, 18) == ScaleDirection.MULTIPLY
        assert ScaleDirection.between(18, 6) == ScaleDirection.DIVIDE
        assert ScaleDirection.between(18, 18) == ScaleDirection.NONE

    def test_should_only_flag_divide_as_lossy(self) -> None:
        """Test is_lossy."""
        assert ScaleDirection.is_lossy(ScaleDirection.DIVIDE) is True
        assert ScaleDirection.is_lossy(ScaleDirection.MULTIPLY) is False
        assert ScaleDirection.is_lossy(ScaleDirection.NONE) is False


class TestScalingFactor:
    """Test suite for scaling_factor."""

    def test_should_divide_when_target_has_fewer_decimals(self) -> None:
        """Test 18 -> 6 decimals."""
        # Act
        scale = scaling_factor(18, 6)

        # Assert
        assert scale.direction == ScaleDirection.DIVIDE
        assert scale.power == 12
        assert scale.factor == 10**12

    def test_should_multiply_when_target_has_more_decimals(self) -> None:
        """Test 6 -> 24 decimals."""
        scale = scaling_factor(6, 24)

        assert scale.direction == ScaleDirection.MULTIPLY
        assert scale.power == 18
        assert scale.factor == 10**18

    def test_should_not_scale_equal_decimals(self) -> None:
        """Test equal precisions."""
        scale = scaling_factor(18, 18)

        assert scale == ScalingFactor(direction=ScaleDirection.NONE, power=0)
        assert scale.factor == 1

    @pytest.mark.parametrize(("a", "b"), [(0, 32), (24, 18), (38, 6), (7, 7)])
    def test_should_use_absolute_difference_as_power(self, a: int, b: int) -> None:
        """Test that power is symmetric in its arguments."""
        assert scaling_factor(a, b).power == abs(a - b)
        assert scaling_factor(b, a).power == scaling_factor(a, b).power

    def test_should_be_immutable(self) -> None:
        """Test that ScalingFactor is frozen."""
        scale = scaling_factor(18, 6)

        with pytest.raises(AttributeError):
            scale.power = 3  # type: ignore[misc]


class TestAdjustDecimals:
    """Test suite for adjust_decimals."""

    def test_should_scale_down_to_lower_precision(self) -> None:
        """Test 24 -> 18 decimals."""
        assert adjust_decimals(10**24, 24, 18) == 10**18

    def test_should_scale_up_to_higher_precision(self) -> None:
        """Test 18 -> 24 decimals."""
        assert adjust_decimals(10**18, 18, 24) == 10**24

    def test_should_leave_equal_precision_unchanged(self) -> None:
        """Test 18 -> 18 decimals."""
        assert adjust_decimals(10**18, 18, 18) == 10**18

    def test_should_truncate_dropped_smallest_units(self) -> None:
        """Test that dividing floors the result."""
        assert adjust_decimals(1_999_999, 6, 0) == 1
        assert adjust_decimals(999, 3, 0) == 0

    def test_should_raise_when_scaling_up_overflows(self) -> None:
        """Test overflow on the multiply path."""
        # Arrange
        amount = U256_MAX // 10**31

        # Act & Assert
        with pytest.raises(ArithmeticOverflowError):
            adjust_decimals(amount, 0, MAX_DECIMAL_DIFF)
