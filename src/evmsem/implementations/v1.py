"""
Candidate v1 - Naive Python-int port

Known issues:
- sub does not wrap negative differences
- sdiv/smod use Python floor semantics instead of truncation
- slt/sgt compare the unsigned values
- bitwise_and returns its first operand
- mstore grows memory to address + 32 without word alignment
- div/mod/sdiv/smod by zero raise ZeroDivisionError
"""

UINT256_MAX = (1 << 256) - 1


def _signed(x: int) -> int:
    return x - (1 << 256) if x >> 255 else x


def add(x: int, y: int) -> int:
    return (x + y) & UINT256_MAX


def sub(x: int, y: int) -> int:
    # BUG: no wraparound
    return x - y


def mul(x: int, y: int) -> int:
    return (x * y) & UINT256_MAX


def div(x: int, y: int) -> int:
    # BUG: no zero check
    return x // y


def sdiv(x: int, y: int) -> int:
    # BUG: floor division
    return (_signed(x) // _signed(y)) & UINT256_MAX


def mod(x: int, y: int) -> int:
    return x % y


def smod(x: int, y: int) -> int:
    # BUG: sign follows the divisor
    return (_signed(x) % _signed(y)) & UINT256_MAX


def exp(x: int, y: int) -> int:
    return pow(x, y, 1 << 256)


def lt(x: int, y: int) -> int:
    return int(x < y)


def gt(x: int, y: int) -> int:
    return int(x > y)


def slt(x: int, y: int) -> int:
    # BUG: unsigned comparison
    return int(x < y)


def sgt(x: int, y: int) -> int:
    # BUG: unsigned comparison
    return int(x > y)


def eq(x: int, y: int) -> int:
    return int(x == y)


def is_zero(x: int) -> int:
    return int(x == 0)


def bitwise_and(x: int, y: int) -> int:
    # BUG: ignores y
    return x


def bitwise_or(x: int, y: int) -> int:
    return x | y


def bitwise_xor(x: int, y: int) -> int:
    return x ^ y


def bitwise_not(x: int) -> int:
    return UINT256_MAX - x


def mstore(address: int, value: int, memory: bytes) -> bytes:
    data = bytearray(memory)
    end = address + 32
    if end > len(data):
        # BUG: not rounded up to a word boundary
        data.extend(bytes(end - len(data)))
    data[address:end] = value.to_bytes(32, 'big')
    return bytes(data)
