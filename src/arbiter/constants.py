"""
Arbiter Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: SIZE_COUNT_FACTOR not FACTOR_SIZE.
"""

# =============================================================================
# Size Policy
# =============================================================================

SIZE_COUNT_FACTOR: int = 16  # Bounded count never exceeds 16 * size
SIZE_DEFAULT: int = 10  # Size used when the caller does not pass one
EXP_RATE: float = 1.0  # Rate of the exponential distribution behind counts

# =============================================================================
# Seeds
# =============================================================================

SEED_VALUE_MIN: int = 0
SEED_VALUE_MAX: int = 2**63 - 1

# =============================================================================
# Integer Ranges
# =============================================================================

INT8_VALUE_MIN: int = -(2**7)
INT8_VALUE_MAX: int = 2**7 - 1
UINT8_VALUE_MAX: int = 2**8 - 1

INT_BITS_COUNT: int = 64  # Native machine width
INT_VALUE_MIN: int = -(2 ** (INT_BITS_COUNT - 1))
INT_VALUE_MAX: int = 2 ** (INT_BITS_COUNT - 1) - 1
UINT_VALUE_MAX: int = 2**INT_BITS_COUNT - 1

# =============================================================================
# Characters
# =============================================================================

CHAR_CODE_POINT_MAX: int = 0x10FFFF
CHAR_SURROGATE_MIN: int = 0xD800
CHAR_SURROGATE_COUNT: int = 0x800  # 0xD800..0xDFFF are not scalar values
CHAR_SCALAR_COUNT: int = CHAR_CODE_POINT_MAX + 1 - CHAR_SURROGATE_COUNT

# =============================================================================
# Composites
# =============================================================================

TUPLE_ARITY_MIN: int = 2
TUPLE_ARITY_MAX: int = 6

# =============================================================================
# Text
# =============================================================================

# Separator tokens mixed into the sample corpus; newline is one draw in three
TEXT_SEPARATORS: tuple[str, ...] = (" ", " ", "\n")
