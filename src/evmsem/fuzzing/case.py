"""Conformance test cases: one operation applied to concrete operands."""

from dataclasses import dataclass
from types import ModuleType
from typing import Tuple, Union

from evmsem.memory import Memory, MemoryAlignmentError
from evmsem.opcodes import Operation, get_operation
from evmsem.words import WORD_BYTES, EvmSemException, check_word, is_word


class InvalidCandidateResult(EvmSemException):
    """Raised when a candidate returns something other than a word or memory bytes."""
    pass


# An int for word operations, the resulting memory bytes for mstore
Outcome = Union[int, bytes]


@dataclass(frozen=True)
class Case:
    """
    A single operation application.

    For mstore the operands are (address, value) and ``memory`` holds the
    buffer before the store. Word operations leave ``memory`` empty.
    """
    operation: str
    operands: Tuple[int, ...]
    memory: bytes = b""

    def __post_init__(self):
        op = get_operation(self.operation)
        if len(self.operands) != op.arity:
            raise ValueError(
                f"{self.operation} takes {op.arity} operands, got {len(self.operands)}"
            )
        for i, operand in enumerate(self.operands):
            check_word(operand, f"{self.operation} operand {i}")
        if len(self.memory) % WORD_BYTES != 0:
            raise MemoryAlignmentError(
                f"Case memory size must be a multiple of {WORD_BYTES}, got {len(self.memory)}"
            )

    @property
    def op(self) -> Operation:
        return get_operation(self.operation)

    def __str__(self) -> str:
        args = ', '.join(hex(v) for v in self.operands)
        if self.op.uses_memory:
            return f"{self.operation}({args}, memory[{len(self.memory)}])"
        return f"{self.operation}({args})"


def run_reference(case: Case) -> Outcome:
    """Evaluate ``case`` with the reference semantics."""
    op = case.op
    if op.uses_memory:
        return bytes(op.function(*case.operands, Memory(case.memory)))
    return op.function(*case.operands)


def run_candidate(case: Case, impl: ModuleType) -> Outcome:
    """
    Evaluate ``case`` with a candidate module. Whatever the candidate raises propagates.

    Raises:
        InvalidCandidateResult: If a word operation returns anything but an int
            in [0, 2**256), or mstore returns anything but bytes
    """
    function = getattr(impl, case.operation)
    if case.op.uses_memory:
        result = function(*case.operands, case.memory)
        if not isinstance(result, (bytes, bytearray)):
            raise InvalidCandidateResult(
                f"{case.operation} must return bytes, got {type(result).__name__}"
            )
        return bytes(result)
    result = function(*case.operands)
    if type(result) is not int or not is_word(result):
        raise InvalidCandidateResult(f"{case.operation} must return a word, got {result!r}")
    return result
