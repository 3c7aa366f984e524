"""Bitwise operators over 256-bit words."""

from .words import UINT256_MAX, Word


def bitwise_not(x: Word) -> Word:
    """Flip every bit: 2**256 - 1 - x."""
    return x ^ UINT256_MAX


def bitwise_and(x: Word, y: Word) -> Word:
    return x & y


def bitwise_or(x: Word, y: Word) -> Word:
    return x | y


def bitwise_xor(x: Word, y: Word) -> Word:
    return x ^ y
