"""
Word arithmetic.

Every operation is total over 256-bit words and reduces its result modulo
2**256. Division and modulo by zero yield 0.
"""

from typing import Callable

from .words import (
    UINT256_MAX, Word,
    to_signed, from_signed,
    u256_div, u256_mod, s256_div, s256_mod,
)


def add(x: Word, y: Word) -> Word:
    """(x + y) mod 2**256."""
    return (x + y) & UINT256_MAX


def sub(x: Word, y: Word) -> Word:
    """(x - y) mod 2**256. A negative difference wraps."""
    return (x - y) & UINT256_MAX


def mul(x: Word, y: Word) -> Word:
    """(x * y) mod 2**256. Products below 2**256 are returned exactly."""
    return (x * y) & UINT256_MAX


# =============================================================================
# Division family
# =============================================================================

def _divide(x: Word, y: Word, op: Callable[[int, int], int], signed: bool) -> Word:
    if signed:
        return from_signed(op(to_signed(x), to_signed(y)))
    return op(x, y) & UINT256_MAX


def div(x: Word, y: Word) -> Word:
    """Unsigned floor division, x / 0 == 0."""
    return _divide(x, y, u256_div, signed=False)


def sdiv(x: Word, y: Word) -> Word:
    """
    Signed truncating division over the two's-complement reading of x and y.

    x / 0 == 0, and INT256_MIN / -1 wraps back to INT256_MIN.
    """
    return _divide(x, y, s256_div, signed=True)


def mod(x: Word, y: Word) -> Word:
    """Unsigned remainder, x % 0 == 0."""
    return _divide(x, y, u256_mod, signed=False)


def smod(x: Word, y: Word) -> Word:
    """Signed remainder whose sign follows the dividend, x % 0 == 0."""
    return _divide(x, y, s256_mod, signed=True)


def exp(x: Word, y: Word) -> Word:
    """(x ** y) mod 2**256; exp(x, 0) == 1 for every x, including 0."""
    return pow(x, y, UINT256_MAX + 1)
