"""Word comparison. Every predicate returns the word 1 when it holds and 0 otherwise."""

from .words import Word, to_signed


def _flag(holds: bool) -> Word:
    return 1 if holds else 0


def lt(x: Word, y: Word) -> Word:
    return _flag(x < y)


def gt(x: Word, y: Word) -> Word:
    return _flag(x > y)


def slt(x: Word, y: Word) -> Word:
    """Signed less-than over the two's-complement reading of both operands."""
    return _flag(to_signed(x) < to_signed(y))


def sgt(x: Word, y: Word) -> Word:
    """Signed greater-than over the two's-complement reading of both operands."""
    return _flag(to_signed(x) > to_signed(y))


def eq(x: Word, y: Word) -> Word:
    return _flag(x == y)


def is_zero(x: Word) -> Word:
    return _flag(x == 0)
