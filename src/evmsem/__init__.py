"""evmsem: reference semantics for the 256-bit word operations of a stack VM."""

from .words import (
    # Constants
    WORD_BITS, WORD_BYTES, UINT256_MAX, UINT256_CEIL, INT256_MIN, INT256_MAX,
    Word, SignedWord,
    # Exceptions
    EvmSemException, InvalidWord,
    # Two's complement
    is_word, to_signed, from_signed,
)

from .arithmetic import add, sub, mul, div, sdiv, mod, smod, exp
from .comparison import lt, gt, slt, sgt, eq, is_zero
from .bitwise import bitwise_not, bitwise_and, bitwise_or, bitwise_xor

from .memory import (
    Memory, MemoryAlignmentError, InvalidMemoryAccess,
    mstore, mload,
)

from .opcodes import Operation, OPERATIONS, REQUIRED_OPERATIONS, get_operation

__version__ = "0.1.0"
