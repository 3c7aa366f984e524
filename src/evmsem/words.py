"""
256-bit machine words.

A Word is a plain Python int in [0, 2**256). This module holds the width
constants, the two's-complement conversions and the zero-safe division
primitives shared by the arithmetic and comparison layers.
"""

# =============================================================================
# Constants
# =============================================================================

WORD_BITS = 256
WORD_BYTES = WORD_BITS // 8

UINT256_CEIL = 1 << WORD_BITS
UINT256_MAX = UINT256_CEIL - 1

INT256_MIN = -(1 << (WORD_BITS - 1))
INT256_MAX = (1 << (WORD_BITS - 1)) - 1

SIGN_BIT = 1 << (WORD_BITS - 1)

Word = int
SignedWord = int


# =============================================================================
# Exceptions
# =============================================================================

class EvmSemException(Exception):
    """Base exception for all evmsem errors."""
    pass


class InvalidWord(EvmSemException, ValueError):
    """Raised when a value outside [0, 2**256) is handed to a validating API."""
    pass


def is_word(value: int) -> bool:
    return type(value) is int and 0 <= value <= UINT256_MAX


def check_word(value: int, what: str = "value") -> Word:
    if not is_word(value):
        raise InvalidWord(f"{what} must be in [0, 2**256), got {value!r}")
    return value


# =============================================================================
# Two's complement
# =============================================================================

def to_signed(x: Word) -> SignedWord:
    """Read the top bit of ``x`` as a sign bit."""
    if x & SIGN_BIT:
        return x - UINT256_CEIL
    return x


def from_signed(x: SignedWord) -> Word:
    """Inverse of :func:`to_signed`; wraps any int onto the 256-bit pattern."""
    return x & UINT256_MAX


# =============================================================================
# Zero-safe division primitives
# =============================================================================

def u256_div(x: Word, y: Word) -> Word:
    if y == 0:
        return 0
    return x // y


def u256_mod(x: Word, y: Word) -> Word:
    if y == 0:
        return 0
    return x % y


def s256_div(x: SignedWord, y: SignedWord) -> SignedWord:
    """
    Truncating signed division with x / 0 == 0.

    Operands and result are signed ints. INT256_MIN / -1 yields 2**255,
    which is out of signed range; from_signed() wraps it back to INT256_MIN.
    """
    if y == 0:
        return 0
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q


def s256_mod(x: SignedWord, y: SignedWord) -> SignedWord:
    """Signed remainder with the sign of the dividend, x % 0 == 0."""
    if y == 0:
        return 0
    r = abs(x) % abs(y)
    return -r if x < 0 else r
