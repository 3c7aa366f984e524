"""
Tests for word-aligned memory and mstore/mload.

Run with: uv run pytest tests/test_memory.py
"""

import pytest

from evmsem.words import UINT256_MAX, UINT256_CEIL, InvalidWord
from evmsem.memory import (
    Memory, MemoryAlignmentError, InvalidMemoryAccess,
    aligned_size, mstore, mload,
)


def test_empty_memory():
    memory = Memory()
    assert memory.size == 0
    assert len(memory) == 0
    assert bytes(memory) == b""


def test_aligned_size():
    assert aligned_size(0) == 0
    assert aligned_size(1) == 32
    assert aligned_size(32) == 32
    assert aligned_size(33) == 64
    assert aligned_size(37) == 64


def test_mstore_into_empty_memory():
    memory = mstore(0, 1, Memory())
    assert memory.size == 32
    assert bytes(memory) == bytes(31) + b"\x01"


def test_mstore_grows_to_covering_word():
    before = bytes(range(32))
    value = 0xDEADBEEF << 200
    memory = mstore(5, value, Memory(before))
    assert memory.size == 64
    assert bytes(memory)[:5] == before[:5]
    assert memory.read_word(5) == value
    assert bytes(memory)[37:] == bytes(27)


def test_mstore_preserves_bytes_outside_written_range():
    before = bytes((i * 7 + 1) & 0xFF for i in range(96))
    memory = mstore(64, UINT256_MAX, Memory(before))
    after = bytes(memory)
    assert memory.size == 96
    assert after[:64] == before[:64]
    assert after[64:] == b"\xff" * 32


def test_mstore_mutates_and_returns_same_memory():
    memory = Memory()
    assert mstore(0, 7, memory) is memory
    assert memory.read_word(0) == 7


def test_mstore_never_shrinks():
    memory = Memory(bytes(128))
    mstore(0, 1, memory)
    assert memory.size == 128


def test_mload_expands_and_reads_zero():
    value, memory = mload(64, Memory())
    assert value == 0
    assert memory.size == 96


def test_mload_reads_stored_word():
    memory = mstore(40, 0x1234, Memory())
    value, _ = mload(40, memory)
    assert value == 0x1234


def test_expand_zero_length_is_noop():
    memory = Memory()
    memory.expand(1000, 0)
    assert memory.size == 0


def test_expand_rejects_negative():
    with pytest.raises(InvalidMemoryAccess):
        Memory().expand(-1, 32)
    with pytest.raises(InvalidMemoryAccess):
        Memory().expand(0, -1)


def test_misaligned_buffer_rejected():
    with pytest.raises(MemoryAlignmentError):
        Memory(bytes(33))


def test_raw_write_requires_capacity():
    with pytest.raises(InvalidMemoryAccess):
        Memory().write_word(0, 1)
    with pytest.raises(InvalidMemoryAccess):
        Memory(bytes(32)).read_word(1)


def test_raw_write_rejects_non_words():
    memory = Memory(bytes(32))
    with pytest.raises(InvalidWord):
        memory.write_word(0, UINT256_CEIL)
    with pytest.raises(InvalidWord):
        memory.write_word(0, -1)


def test_copy_is_independent():
    original = mstore(0, 1, Memory())
    snapshot = original.copy()
    mstore(32, 2, original)
    assert snapshot.size == 32
    assert original.size == 64
    assert snapshot != original
    assert snapshot == Memory(bytes(31) + b"\x01")
