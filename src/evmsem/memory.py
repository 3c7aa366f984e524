"""
Word-aligned machine memory.

Memory is a byte buffer whose length is always a multiple of WORD_BYTES.
It only ever grows, in whole-word steps, and new bytes are zero.
A Memory is owned by a single execution context: mstore() and mload()
mutate it in place and hand the same object back. Use copy() to keep an
older version around.
"""

import logging
from typing import Tuple

from .words import WORD_BYTES, Word, EvmSemException, check_word

logger = logging.getLogger(__name__)


class MemoryAlignmentError(EvmSemException):
    """Raised when a buffer whose length is not a multiple of WORD_BYTES is wrapped."""
    pass


class InvalidMemoryAccess(EvmSemException):
    """Raised on a negative offset/length or a raw access beyond the current size."""
    pass


def aligned_size(end: int) -> int:
    """Smallest multiple of WORD_BYTES that is >= end."""
    return (end + WORD_BYTES - 1) // WORD_BYTES * WORD_BYTES


class Memory:
    """Growable byte buffer with a word-aligned size."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes = b"") -> None:
        if len(data) % WORD_BYTES != 0:
            raise MemoryAlignmentError(
                f"Memory size must be a multiple of {WORD_BYTES}, got {len(data)}"
            )
        self._data = bytearray(data)

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Memory):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Memory(size={self.size})"

    def copy(self) -> 'Memory':
        return Memory(bytes(self._data))

    def expand(self, address: int, num_bytes: int) -> 'Memory':
        """
        Grow so that bytes [address, address + num_bytes) exist.

        Growth happens in whole words, so the size stays a multiple of
        WORD_BYTES. A zero-length access never grows memory.

        Raises:
            InvalidMemoryAccess: If address or num_bytes is negative
        """
        if address < 0 or num_bytes < 0:
            raise InvalidMemoryAccess(
                f"Negative memory access: address={address}, length={num_bytes}"
            )
        if num_bytes == 0:
            return self
        new_size = aligned_size(address + num_bytes)
        if new_size > len(self._data):
            logger.debug("expanding memory from %d to %d bytes", len(self._data), new_size)
            self._data.extend(bytes(new_size - len(self._data)))
        return self

    def _check_range(self, address: int) -> None:
        if address < 0 or address + WORD_BYTES > len(self._data):
            raise InvalidMemoryAccess(
                f"Word access at {address} outside memory of size {len(self._data)}"
            )

    def write_word(self, address: int, value: Word) -> 'Memory':
        """Store ``value`` big-endian at [address, address + 32). Capacity must exist."""
        check_word(value)
        self._check_range(address)
        self._data[address:address + WORD_BYTES] = value.to_bytes(WORD_BYTES, 'big')
        return self

    def read_word(self, address: int) -> Word:
        """Read the big-endian word at [address, address + 32). Capacity must exist."""
        self._check_range(address)
        return int.from_bytes(self._data[address:address + WORD_BYTES], 'big')


def mstore(address: int, value: Word, memory: Memory) -> Memory:
    """Expand ``memory`` to cover the word at ``address``, then write ``value`` there."""
    return memory.expand(address, WORD_BYTES).write_word(address, value)


def mload(address: int, memory: Memory) -> Tuple[Word, Memory]:
    """Expand ``memory`` to cover the word at ``address`` and read it."""
    memory.expand(address, WORD_BYTES)
    return memory.read_word(address), memory
