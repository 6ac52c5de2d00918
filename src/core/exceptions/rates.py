"""
Custom exception hierarchy for token pair rate calculations.

This module defines domain-specific exceptions for better error handling.
"""


class PairRateException(Exception):
    """Base exception for all pair rate errors."""

    pass


class ValidationError(PairRateException):
    """Raised when input validation fails."""

    pass


class CalculationError(PairRateException):
    """Raised when mathematical calculations fail."""

    pass


class InvalidRateError(ValidationError):
    """Raised when a rate component is zero or negative."""

    def __init__(self, rate: tuple[int, int]):
        self.rate = rate
        super().__init__(f"Rate components must be greater than 0, got {rate}")


class RateOutOfRangeError(ValidationError):
    """Raised when a rate component exceeds the maximum rate."""

    def __init__(self, rate: tuple[int, int], max_rate: int):
        self.rate = rate
        self.max_rate = max_rate
        super().__init__(f"Rate components must not exceed {max_rate}, got {rate}")


class DecimalsOutOfRangeError(ValidationError):
    """Raised when a decimals value is outside the supported precision range."""

    def __init__(self, decimals: tuple[int, int], max_decimals: int):
        self.decimals = decimals
        self.max_decimals = max_decimals
        super().__init__(f"Decimals must be between 0 and {max_decimals}, got {decimals}")


class DecimalDiffTooLargeError(ValidationError):
    """Raised when the two token precisions are too far apart."""

    def __init__(self, decimals: tuple[int, int], max_diff: int):
        self.decimals = decimals
        self.max_diff = max_diff
        self.diff = abs(decimals[0] - decimals[1])
        super().__init__(
            f"Decimal difference {self.diff} exceeds maximum {max_diff} for decimals {decimals}"
        )


class InvalidTokenPairError(ValidationError):
    """Raised when a token identifier is empty or not a string."""

    def __init__(self, token_pair: tuple[str, str]):
        self.token_pair = token_pair
        super().__init__(f"Token identifiers must be non-empty strings, got {token_pair!r}")


class InvalidAmountError(ValidationError):
    """Raised when an amount is not an unsigned integer of the working width."""

    def __init__(self, amount: object, param_name: str = "amount"):
        self.amount = amount
        self.param_name = param_name
        super().__init__(f"{param_name} must be an unsigned 128-bit integer, got {amount!r}")


class ArithmeticOverflowError(CalculationError):
    """Raised when a checked step exceeds the wide accumulator."""

    def __init__(self, operation: str, bound: int):
        self.operation = operation
        self.bound = bound
        super().__init__(
            f"Arithmetic overflow in {operation}: result exceeds {bound.bit_length()}-bit bound"
        )


class ResultOutOfRangeError(CalculationError):
    """Raised when a computed result does not fit the amount type."""

    def __init__(self, value: int, max_value: int):
        self.value = value
        self.max_value = max_value
        super().__init__(f"Result {value} exceeds maximum amount {max_value}")


class DivisionByZeroError(CalculationError):
    """Raised when a divisor is zero."""

    def __init__(self, operation: str = "division"):
        self.operation = operation
        super().__init__(f"Division by zero in {operation}")
