"""
Core constants and limits.

Defines the published precision and rate limits together with the integer
widths used by the checked conversion pipeline.
"""

# Integer widths
AMOUNT_BITS = 128  # Public amount type (unsigned)
ACCUMULATOR_BITS = 256  # Intermediate multiply/divide type (unsigned)
U128_MAX = (1 << AMOUNT_BITS) - 1
U256_MAX = (1 << ACCUMULATOR_BITS) - 1

# Published limits
MAX_DECIMALS = 38  # Largest decimal precision accepted for a token
MAX_DECIMAL_DIFF = 32  # Largest scaling power applied in a single conversion
MAX_RATE = U128_MAX // 2  # Largest rate component, leaves headroom for rate * amount

# Display
HUMAN_RATE_PRECISION = 18  # Significant digits for human-readable rates

# Defaults
DEFAULT_INPUT_TOKEN = "TOKEN_A"
DEFAULT_OUTPUT_TOKEN = "TOKEN_B"
DEFAULT_RATE = (1, 1)
DEFAULT_DECIMALS = (18, 18)
