"""
Enumeration-based test generation.

Systematically enumerates operation applications over a bounded set of
boundary words. Unlike probabilistic fuzzing, enumeration provides
guaranteed coverage of the bounded model.
"""

from typing import Iterable, Iterator, List

from evmsem.opcodes import OPERATIONS
from evmsem.words import UINT256_MAX, SIGN_BIT, WORD_BYTES
from .case import Case


# ============================================================
# Configuration
# ============================================================

# Interesting words for boundary value analysis
BOUNDARY_WORDS = [
    0,                      # Zero
    1,                      # One
    2,                      # Small value
    WORD_BYTES - 1,         # Last byte offset in a word
    WORD_BYTES,             # Word size
    0xFF,                   # Byte max
    (1 << 64) - 1,          # 64-bit max (limb boundary)
    1 << 64,                # First value needing a second limb
    (1 << 128) - 1,         # Product of two of these still fits
    SIGN_BIT - 1,           # Largest positive signed value
    SIGN_BIT,               # Signed minimum
    SIGN_BIT + 1,           # Signed minimum + 1
    UINT256_MAX - 1,        # -2 signed
    UINT256_MAX,            # -1 signed, all ones
]

# Minimal interesting words for smaller test suites
MINIMAL_WORDS = [0, 1, SIGN_BIT, UINT256_MAX]

DIVISION_OPERATIONS = ["div", "sdiv", "mod", "smod"]

# Addresses around the first and second word boundaries
MEMORY_ADDRESSES = [0, 1, 5, WORD_BYTES - 1, WORD_BYTES, WORD_BYTES + 1, 2 * WORD_BYTES - 1, 100]

# Initial memory sizes, in words
MEMORY_SIZES = [0, 1, 2, 4]


def _operations(arity: int, uses_memory: bool = False) -> List[str]:
    return [name for name, op in OPERATIONS.items()
            if op.arity == arity and op.uses_memory == uses_memory]


# ============================================================
# Word Operations
# ============================================================

def enumerate_binary_cases(words: Iterable[int] = MINIMAL_WORDS) -> Iterator[Case]:
    """Every binary word operation applied to every ordered pair of ``words``."""
    words = list(words)
    for name in _operations(2):
        for x in words:
            for y in words:
                yield Case(name, (x, y))


def enumerate_unary_cases(words: Iterable[int] = MINIMAL_WORDS) -> Iterator[Case]:
    for name in _operations(1):
        for x in words:
            yield Case(name, (x,))


def enumerate_division_by_zero_cases(words: Iterable[int] = BOUNDARY_WORDS) -> Iterator[Case]:
    """Every division and modulo operation with a zero divisor. All must yield 0."""
    for name in DIVISION_OPERATIONS:
        for x in words:
            yield Case(name, (x, 0))


def enumerate_signed_overflow_cases() -> Iterator[Case]:
    """
    The two's-complement edge cases around the signed minimum.

    sdiv(SIGN_BIT, -1) is the one quotient that does not fit in a signed
    word and must wrap back to SIGN_BIT.
    """
    minus_one = UINT256_MAX
    for name in ["sdiv", "smod", "slt", "sgt"]:
        yield Case(name, (SIGN_BIT, minus_one))
        yield Case(name, (minus_one, SIGN_BIT))
        yield Case(name, (SIGN_BIT, 1))
        yield Case(name, (SIGN_BIT, SIGN_BIT))
        yield Case(name, (SIGN_BIT - 1, SIGN_BIT))


# ============================================================
# Memory
# ============================================================

def enumerate_memory_cases(values: Iterable[int] = MINIMAL_WORDS) -> Iterator[Case]:
    """
    mstore at addresses around word boundaries into memories of several sizes.

    Prior memory is filled with a recognizable pattern so that a store that
    clobbers bytes outside its range shows up as a mismatch.
    """
    values = list(values)
    for words in MEMORY_SIZES:
        size = words * WORD_BYTES
        memory = bytes((i * 7 + 1) & 0xFF for i in range(size))
        for address in MEMORY_ADDRESSES:
            for value in values:
                yield Case("mstore", (address, value), memory)


# ============================================================
# Comprehensive Test Suites
# ============================================================

def generate_comprehensive_suite(words: Iterable[int] = BOUNDARY_WORDS) -> Iterator[Case]:
    """
    Generate comprehensive exhaustive test suite with deduplication.

    Combines the operand-pair enumeration over ``words`` with the targeted
    edge-case generators, removing any duplicates to ensure each case is unique.

    Yields:
        Cases in a deterministic order
    """
    words = list(words)
    seen = set()
    generators = [
        enumerate_binary_cases(words),
        enumerate_unary_cases(words),
        enumerate_division_by_zero_cases(words),
        enumerate_signed_overflow_cases(),
        enumerate_memory_cases(),
    ]
    for generator in generators:
        for case in generator:
            if case not in seen:
                seen.add(case)
                yield case
