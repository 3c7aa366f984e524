"""
Candidate v3 - Four 64-bit Limbs

Words are held as tuples of four 64-bit limbs, least significant first,
and every operation reduces limb by limb the way a fixed-width backend
would. Integers are only used at the module boundary.

Known issues: none.
"""

from typing import Tuple

LIMBS = 4
LIMB_BITS = 64
LIMB_MASK = (1 << LIMB_BITS) - 1

Limbs = Tuple[int, int, int, int]

ZERO: Limbs = (0, 0, 0, 0)
ONE: Limbs = (1, 0, 0, 0)


# =============================================================================
# Limb helpers
# =============================================================================

def to_limbs(x: int) -> Limbs:
    return tuple((x >> (LIMB_BITS * i)) & LIMB_MASK for i in range(LIMBS))


def from_limbs(a: Limbs) -> int:
    result = 0
    for i in reversed(range(LIMBS)):
        result = (result << LIMB_BITS) | a[i]
    return result


def _add(a: Limbs, b: Limbs) -> Limbs:
    out = []
    carry = 0
    for i in range(LIMBS):
        t = a[i] + b[i] + carry
        out.append(t & LIMB_MASK)
        carry = t >> LIMB_BITS
    return tuple(out)


def _sub(a: Limbs, b: Limbs) -> Limbs:
    out = []
    borrow = 0
    for i in range(LIMBS):
        t = a[i] - b[i] - borrow
        borrow = 1 if t < 0 else 0
        out.append(t & LIMB_MASK)
    return tuple(out)


def _mul(a: Limbs, b: Limbs) -> Limbs:
    out = [0] * LIMBS
    for i in range(LIMBS):
        carry = 0
        for j in range(LIMBS - i):
            t = out[i + j] + a[i] * b[j] + carry
            out[i + j] = t & LIMB_MASK
            carry = t >> LIMB_BITS
    return tuple(out)


def _cmp(a: Limbs, b: Limbs) -> int:
    for i in reversed(range(LIMBS)):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def _bit(a: Limbs, n: int) -> int:
    return (a[n // LIMB_BITS] >> (n % LIMB_BITS)) & 1


def _shl1(a: Limbs, low_bit: int) -> Tuple[Limbs, int]:
    """Shift left by one, shifting ``low_bit`` in. Returns the limbs and the bit shifted out."""
    out = []
    carry = low_bit
    for i in range(LIMBS):
        out.append(((a[i] << 1) | carry) & LIMB_MASK)
        carry = a[i] >> (LIMB_BITS - 1)
    return tuple(out), carry


def _divmod(a: Limbs, b: Limbs) -> Tuple[Limbs, Limbs]:
    if b == ZERO:
        return ZERO, ZERO
    q = ZERO
    r = ZERO
    for n in reversed(range(LIMBS * LIMB_BITS)):
        r, overflow = _shl1(r, _bit(a, n))
        q, _ = _shl1(q, 0)
        # A shifted-out bit means r >= 2**256 > b; the wrapping subtraction is still exact.
        if overflow or _cmp(r, b) >= 0:
            r = _sub(r, b)
            q = (q[0] | 1,) + q[1:]
    return q, r


def _negative(a: Limbs) -> bool:
    return a[LIMBS - 1] >> (LIMB_BITS - 1) == 1


def _negate(a: Limbs) -> Limbs:
    return _sub(ZERO, a)


def _abs(a: Limbs) -> Limbs:
    return _negate(a) if _negative(a) else a


# =============================================================================
# Operations
# =============================================================================

def add(x: int, y: int) -> int:
    return from_limbs(_add(to_limbs(x), to_limbs(y)))


def sub(x: int, y: int) -> int:
    return from_limbs(_sub(to_limbs(x), to_limbs(y)))


def mul(x: int, y: int) -> int:
    return from_limbs(_mul(to_limbs(x), to_limbs(y)))


def div(x: int, y: int) -> int:
    return from_limbs(_divmod(to_limbs(x), to_limbs(y))[0])


def mod(x: int, y: int) -> int:
    return from_limbs(_divmod(to_limbs(x), to_limbs(y))[1])


def sdiv(x: int, y: int) -> int:
    a, b = to_limbs(x), to_limbs(y)
    q, _ = _divmod(_abs(a), _abs(b))
    if _negative(a) != _negative(b):
        q = _negate(q)
    return from_limbs(q)


def smod(x: int, y: int) -> int:
    a, b = to_limbs(x), to_limbs(y)
    _, r = _divmod(_abs(a), _abs(b))
    if _negative(a):
        r = _negate(r)
    return from_limbs(r)


def exp(x: int, y: int) -> int:
    base, e = to_limbs(x), to_limbs(y)
    result = ONE
    for n in reversed(range(LIMBS * LIMB_BITS)):
        result = _mul(result, result)
        if _bit(e, n):
            result = _mul(result, base)
    return from_limbs(result)


def lt(x: int, y: int) -> int:
    return 1 if _cmp(to_limbs(x), to_limbs(y)) < 0 else 0


def gt(x: int, y: int) -> int:
    return 1 if _cmp(to_limbs(x), to_limbs(y)) > 0 else 0


def _scmp(a: Limbs, b: Limbs) -> int:
    if _negative(a) != _negative(b):
        return -1 if _negative(a) else 1
    return _cmp(a, b)


def slt(x: int, y: int) -> int:
    return 1 if _scmp(to_limbs(x), to_limbs(y)) < 0 else 0


def sgt(x: int, y: int) -> int:
    return 1 if _scmp(to_limbs(x), to_limbs(y)) > 0 else 0


def eq(x: int, y: int) -> int:
    return 1 if to_limbs(x) == to_limbs(y) else 0


def is_zero(x: int) -> int:
    return 1 if to_limbs(x) == ZERO else 0


def bitwise_and(x: int, y: int) -> int:
    return from_limbs(tuple(a & b for a, b in zip(to_limbs(x), to_limbs(y))))


def bitwise_or(x: int, y: int) -> int:
    return from_limbs(tuple(a | b for a, b in zip(to_limbs(x), to_limbs(y))))


def bitwise_xor(x: int, y: int) -> int:
    return from_limbs(tuple(a ^ b for a, b in zip(to_limbs(x), to_limbs(y))))


def bitwise_not(x: int) -> int:
    return from_limbs(tuple(a ^ LIMB_MASK for a in to_limbs(x)))


def mstore(address: int, value: int, memory: bytes) -> bytes:
    data = bytearray(memory)
    words = (address + 32 + 31) // 32
    if words * 32 > len(data):
        data.extend(bytes(words * 32 - len(data)))
    for i in range(32):
        data[address + 31 - i] = (value >> (8 * i)) & 0xFF
    return bytes(data)
