"""
Property-based tests for the word semantics.

Each operation's postcondition is checked over random words biased toward
boundary values.

Run with: uv run pytest tests/test_properties.py
"""

import pytest
from hypothesis import given, strategies as st

from evmsem import (
    UINT256_MAX, INT256_MIN, INT256_MAX, WORD_BYTES,
    add, sub, mul, div, sdiv, mod, smod, exp,
    lt, gt, slt, sgt, eq, is_zero,
    bitwise_not, bitwise_and, bitwise_or, bitwise_xor,
    Memory, mstore, mload, OPERATIONS,
    to_signed, from_signed, is_word,
)
from evmsem.fuzzing.enumeration import BOUNDARY_WORDS
from evmsem.memory import aligned_size

words = st.one_of(
    st.integers(min_value=0, max_value=UINT256_MAX),
    st.sampled_from(BOUNDARY_WORDS),
)
nonzero_words = words.filter(lambda w: w != 0)
half_words = st.integers(min_value=0, max_value=(1 << 128) - 1)

WORD_OPERATIONS = [name for name, op in OPERATIONS.items() if not op.uses_memory]


# =============================================================================
# Two's complement
# =============================================================================

@given(words)
def test_signed_round_trip(x):
    s = to_signed(x)
    assert INT256_MIN <= s <= INT256_MAX
    assert from_signed(s) == x


@given(st.integers(min_value=INT256_MIN, max_value=INT256_MAX))
def test_unsigned_round_trip(s):
    assert to_signed(from_signed(s)) == s


# =============================================================================
# Arithmetic
# =============================================================================

@given(st.sampled_from(WORD_OPERATIONS), words, words)
def test_results_are_words(name, x, y):
    op = OPERATIONS[name]
    assert is_word(op.function(*(x, y)[:op.arity]))


@given(words, words)
def test_add_commutative_with_identity(x, y):
    assert add(x, y) == add(y, x)
    assert add(x, 0) == x
    assert add(x, y) == (x + y) % (1 << 256)


@given(words, words)
def test_sub_inverts_add(x, y):
    assert sub(add(x, y), y) == x
    assert sub(x, y) == (x - y) % (1 << 256)


@given(half_words, half_words)
def test_mul_exact_when_product_fits(x, y):
    assert mul(x, y) == x * y


@given(words, words)
def test_mul_wraps(x, y):
    assert mul(x, y) == (x * y) % (1 << 256)


@given(words)
def test_division_by_zero_is_zero(x):
    assert div(x, 0) == 0
    assert mod(x, 0) == 0
    assert sdiv(x, 0) == 0
    assert smod(x, 0) == 0


@given(words, nonzero_words)
def test_unsigned_division_identity(x, y):
    assert add(mul(div(x, y), y), mod(x, y)) == x
    assert mod(x, y) < y


@given(words, nonzero_words)
def test_signed_division_identity(x, y):
    assert add(mul(sdiv(x, y), y), smod(x, y)) == x


@given(words, nonzero_words)
def test_smod_sign_follows_dividend(x, y):
    r = to_signed(smod(x, y))
    assert abs(r) < abs(to_signed(y))
    assert r == 0 or (r < 0) == (to_signed(x) < 0)


@given(words, nonzero_words)
def test_sdiv_truncates(x, y):
    a, b = to_signed(x), to_signed(y)
    q = to_signed(sdiv(x, y))
    if (a, b) == (INT256_MIN, -1):
        assert q == INT256_MIN
    else:
        assert abs(q) == abs(a) // abs(b)
        assert q == 0 or (q < 0) == ((a < 0) != (b < 0))


@given(words)
def test_exp_small_exponents(x):
    assert exp(x, 0) == 1
    assert exp(x, 1) == x
    assert exp(x, 2) == mul(x, x)


@given(words, st.integers(min_value=0, max_value=300))
def test_exp_step(x, y):
    assert exp(x, y + 1) == mul(exp(x, y), x)


# =============================================================================
# Comparison
# =============================================================================

@given(words, words)
def test_unsigned_trichotomy(x, y):
    assert lt(x, y) + eq(x, y) + gt(x, y) == 1
    assert lt(x, y) == gt(y, x)
    assert lt(x, y) == (1 if x < y else 0)


@given(words, words)
def test_signed_trichotomy(x, y):
    assert slt(x, y) + eq(x, y) + sgt(x, y) == 1
    assert slt(x, y) == sgt(y, x)
    assert slt(x, y) == (1 if to_signed(x) < to_signed(y) else 0)


@given(words)
def test_is_zero(x):
    assert (is_zero(x) == 1) == (x == 0)
    assert is_zero(x) in (0, 1)


# =============================================================================
# Bitwise
# =============================================================================

@given(words)
def test_not_involution(x):
    assert bitwise_not(bitwise_not(x)) == x
    assert bitwise_not(x) == UINT256_MAX - x


@given(words, words)
def test_and_is_conjunction(x, y):
    assert bitwise_and(x, y) == bitwise_and(y, x)
    assert bitwise_and(x, 0) == 0
    assert bitwise_and(x, UINT256_MAX) == x
    assert bitwise_and(x, bitwise_not(x)) == 0
    assert bitwise_or(bitwise_and(x, y), bitwise_and(x, bitwise_not(y))) == x


@given(words, words)
def test_de_morgan(x, y):
    assert bitwise_not(bitwise_and(x, y)) == bitwise_or(bitwise_not(x), bitwise_not(y))
    assert bitwise_xor(x, y) == bitwise_and(bitwise_or(x, y), bitwise_not(bitwise_and(x, y)))


# =============================================================================
# Memory
# =============================================================================

@given(st.integers(min_value=0, max_value=512), words)
def test_mstore_from_empty(address, value):
    memory = mstore(address, value, Memory())
    assert memory.size == aligned_size(address + WORD_BYTES)
    assert memory.size % WORD_BYTES == 0
    assert mload(address, memory)[0] == value


@given(
    st.integers(min_value=0, max_value=4).flatmap(
        lambda n: st.binary(min_size=n * WORD_BYTES, max_size=n * WORD_BYTES)),
    st.integers(min_value=0, max_value=256),
    words,
)
def test_mstore_only_touches_its_word(before, address, value):
    memory = mstore(address, value, Memory(before))
    after = bytes(memory)
    assert len(after) == max(len(before), aligned_size(address + WORD_BYTES))
    assert len(after) % WORD_BYTES == 0
    assert after[address:address + WORD_BYTES] == value.to_bytes(WORD_BYTES, 'big')
    padded = before + bytes(len(after) - len(before))
    assert after[:address] == padded[:address]
    assert after[address + WORD_BYTES:] == padded[address + WORD_BYTES:]


@pytest.mark.parametrize("name", WORD_OPERATIONS)
def test_every_word_operation_is_total_on_boundaries(name):
    op = OPERATIONS[name]
    for x in BOUNDARY_WORDS:
        for y in BOUNDARY_WORDS:
            assert is_word(op.function(*(x, y)[:op.arity]))
