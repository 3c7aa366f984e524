"""
Tests for word arithmetic and the two's-complement helpers.

Run with: uv run pytest tests/test_arithmetic.py
"""

import pytest

from evmsem.words import (
    UINT256_MAX, UINT256_CEIL, INT256_MIN, INT256_MAX, SIGN_BIT,
    to_signed, from_signed, is_word,
    s256_div, s256_mod,
)
from evmsem.arithmetic import add, sub, mul, div, sdiv, mod, smod, exp


MINUS_ONE = UINT256_MAX


def neg(n: int) -> int:
    return from_signed(-n)


def test_twos_complement():
    assert to_signed(0) == 0
    assert to_signed(1) == 1
    assert to_signed(UINT256_MAX) == -1
    assert to_signed(SIGN_BIT) == INT256_MIN
    assert to_signed(SIGN_BIT - 1) == INT256_MAX
    assert from_signed(-1) == UINT256_MAX
    assert from_signed(INT256_MIN) == SIGN_BIT
    # 2**255 is out of signed range and wraps onto the signed minimum
    assert from_signed(INT256_MAX + 1) == SIGN_BIT


def test_is_word():
    assert is_word(0)
    assert is_word(UINT256_MAX)
    assert not is_word(UINT256_CEIL)
    assert not is_word(-1)


def test_add():
    assert add(2, 3) == 5
    assert add(UINT256_MAX, 1) == 0
    assert add(UINT256_MAX, UINT256_MAX) == UINT256_MAX - 1
    assert add(SIGN_BIT, SIGN_BIT) == 0


def test_sub():
    assert sub(5, 3) == 2
    assert sub(0, 1) == UINT256_MAX
    assert sub(3, 5) == neg(2)
    assert sub(0, SIGN_BIT) == SIGN_BIT


def test_mul():
    assert mul(7, 6) == 42
    assert mul(UINT256_MAX, 2) == UINT256_MAX - 1
    assert mul(1 << 128, 1 << 128) == 0
    half = (1 << 128) - 1
    assert mul(half, half) == half * half
    assert mul(MINUS_ONE, MINUS_ONE) == 1


def test_div():
    assert div(7, 2) == 3
    assert div(2, 7) == 0
    assert div(UINT256_MAX, 1) == UINT256_MAX
    assert div(UINT256_MAX, UINT256_MAX) == 1
    assert div(12345, 0) == 0
    assert div(0, 0) == 0


def test_sdiv_truncates_toward_zero():
    assert sdiv(7, 2) == 3
    assert sdiv(neg(7), 2) == neg(3)
    assert sdiv(7, neg(2)) == neg(3)
    assert sdiv(neg(7), neg(2)) == 3
    assert sdiv(neg(1), 2) == 0


def test_sdiv_edge_cases():
    assert sdiv(neg(7), 0) == 0
    assert sdiv(SIGN_BIT, MINUS_ONE) == SIGN_BIT
    assert sdiv(SIGN_BIT, 1) == SIGN_BIT
    assert sdiv(SIGN_BIT, SIGN_BIT) == 1
    assert sdiv(SIGN_BIT - 1, MINUS_ONE) == SIGN_BIT + 1


def test_mod():
    assert mod(7, 3) == 1
    assert mod(3, 7) == 3
    assert mod(UINT256_MAX, 2) == 1
    assert mod(12345, 0) == 0


def test_smod_sign_follows_dividend():
    assert smod(7, 3) == 1
    assert smod(neg(7), 3) == neg(1)
    assert smod(7, neg(3)) == 1
    assert smod(neg(7), neg(3)) == neg(1)
    assert smod(neg(7), 0) == 0
    assert smod(SIGN_BIT, MINUS_ONE) == 0


def test_exp():
    assert exp(3, 3) == 27
    assert exp(0, 0) == 1
    assert exp(UINT256_MAX, 0) == 1
    assert exp(0, 5) == 0
    assert exp(2, 255) == SIGN_BIT
    assert exp(2, 256) == 0
    assert exp(MINUS_ONE, 2) == 1
    assert exp(MINUS_ONE, 3) == MINUS_ONE
    assert exp(2, UINT256_MAX) == 0


def test_signed_primitives():
    assert s256_div(INT256_MIN, -1) == INT256_MAX + 1
    assert s256_div(-7, 2) == -3
    assert s256_div(-7, 0) == 0
    assert s256_mod(-7, 2) == -1
    assert s256_mod(7, -2) == 1
    assert s256_mod(7, 0) == 0


@pytest.mark.parametrize("fn", [add, sub, mul, div, sdiv, mod, smod, exp])
def test_results_stay_in_range(fn):
    for x in [0, 1, SIGN_BIT, UINT256_MAX]:
        for y in [0, 1, SIGN_BIT, UINT256_MAX]:
            assert is_word(fn(x, y)), f"{fn.__name__}({x:#x}, {y:#x}) left the word range"
