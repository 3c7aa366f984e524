"""
Opcode numbers and the operation table.

OPERATIONS maps each operation name to its opcode, its operand count and
the reference function that defines it. The names double as the function
names a candidate implementation must expose.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from . import arithmetic, bitwise, comparison, memory

# Arithmetic
OP_ADD  = 0x01
OP_MUL  = 0x02
OP_SUB  = 0x03
OP_DIV  = 0x04
OP_SDIV = 0x05
OP_MOD  = 0x06
OP_SMOD = 0x07
OP_EXP  = 0x0A

# Comparison
OP_LT     = 0x10
OP_GT     = 0x11
OP_SLT    = 0x12
OP_SGT    = 0x13
OP_EQ     = 0x14
OP_ISZERO = 0x15

# Bitwise
OP_AND = 0x16
OP_OR  = 0x17
OP_XOR = 0x18
OP_NOT = 0x19

# Memory
OP_MSTORE = 0x52


@dataclass(frozen=True)
class Operation:
    name: str
    opcode: int
    arity: int
    function: Callable
    uses_memory: bool = False


OPERATIONS: Dict[str, Operation] = {op.name: op for op in [
    Operation("add", OP_ADD, 2, arithmetic.add),
    Operation("mul", OP_MUL, 2, arithmetic.mul),
    Operation("sub", OP_SUB, 2, arithmetic.sub),
    Operation("div", OP_DIV, 2, arithmetic.div),
    Operation("sdiv", OP_SDIV, 2, arithmetic.sdiv),
    Operation("mod", OP_MOD, 2, arithmetic.mod),
    Operation("smod", OP_SMOD, 2, arithmetic.smod),
    Operation("exp", OP_EXP, 2, arithmetic.exp),
    Operation("lt", OP_LT, 2, comparison.lt),
    Operation("gt", OP_GT, 2, comparison.gt),
    Operation("slt", OP_SLT, 2, comparison.slt),
    Operation("sgt", OP_SGT, 2, comparison.sgt),
    Operation("eq", OP_EQ, 2, comparison.eq),
    Operation("is_zero", OP_ISZERO, 1, comparison.is_zero),
    Operation("bitwise_and", OP_AND, 2, bitwise.bitwise_and),
    Operation("bitwise_or", OP_OR, 2, bitwise.bitwise_or),
    Operation("bitwise_xor", OP_XOR, 2, bitwise.bitwise_xor),
    Operation("bitwise_not", OP_NOT, 1, bitwise.bitwise_not),
    Operation("mstore", OP_MSTORE, 2, memory.mstore, uses_memory=True),
]}

REQUIRED_OPERATIONS = tuple(OPERATIONS)

BY_OPCODE: Dict[int, Operation] = {op.opcode: op for op in OPERATIONS.values()}


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown operation: {name}") from None
