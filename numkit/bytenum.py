"""Fixed-width unsigned integers held as little-endian byte strings.

Every function takes byte sequences (``bytes``, ``bytearray`` or any
sequence of ints in ``0..255``) with the lowest byte first.  It returns
``bytes`` of the same width. Arithmetic wraps modulo ``256 ** width``.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

ByteLike = bytes | bytearray | Sequence[int]

_WORD_LIMIT = 1 << 32


def _as_bytes(a: ByteLike) -> bytes:
    data = bytes(a)
    if not data:
        raise ValueError("a number needs at least one byte")
    return data


def _value(a: ByteLike) -> int:
    return int.from_bytes(_as_bytes(a), "little")


def _pack(value: int, width: int) -> bytes:
    return (value % (1 << (8 * width))).to_bytes(width, "little")


def _pair(a: ByteLike, b: ByteLike) -> tuple[bytes, bytes]:
    left, right = _as_bytes(a), _as_bytes(b)
    if len(left) != len(right):
        raise ValueError(f"width mismatch: {len(left)} and {len(right)} bytes")
    return left, right


def _check_word(value: int) -> int:
    if not 0 <= value < _WORD_LIMIT:
        raise ValueError("value must fit in an unsigned 32-bit word")
    return value


def compare(a: ByteLike, b: ByteLike) -> int:
    """Return 1, 0 or -1 as ``a`` is greater than, equal to or less than ``b``."""
    left, right = _pair(a, b)
    for x, y in zip(reversed(left), reversed(right)):
        if x != y:
            return 1 if x > y else -1
    return 0


def add(a: ByteLike, b: ByteLike) -> bytes:
    """Return ``a + b``, dropping the carry out of the top byte."""
    left, right = _pair(a, b)
    return _pack(_value(left) + _value(right), len(left))


def add_small(a: ByteLike, value: int) -> bytes:
    """Return ``a`` plus an unsigned 32-bit ``value``."""
    data = _as_bytes(a)
    return _pack(_value(data) + _check_word(value), len(data))


def complement(a: ByteLike) -> bytes:
    """Return the two's complement of ``a`` (its negation modulo the width)."""
    data = _as_bytes(a)
    return _pack(-_value(data), len(data))


def sub(a: ByteLike, b: ByteLike) -> bytes:
    """Return ``a - b``, wrapping around below zero."""
    left, right = _pair(a, b)
    return add(left, complement(right))


def mul(a: ByteLike, b: ByteLike) -> bytes:
    """Return the low bytes of ``a * b``."""
    left, right = _pair(a, b)
    return _pack(_value(left) * _value(right), len(left))


def mul_small(a: ByteLike, value: int) -> bytes:
    """Return the low bytes of ``a`` times an unsigned 32-bit ``value``."""
    data = _as_bytes(a)
    return _pack(_value(data) * _check_word(value), len(data))


def high_index(a: ByteLike) -> int:
    """Return the index of the highest non-zero byte, or 0 if all are zero."""
    data = _as_bytes(a)
    leading_zeros = sum(1 for _ in takewhile(lambda byte: byte == 0, reversed(data)))
    return max(len(data) - 1 - leading_zeros, 0)


def divmod_small(a: ByteLike, divisor: int) -> tuple[bytes, int]:
    """Divide by a single-byte ``divisor``; return ``(quotient, remainder)``."""
    if not 0 <= divisor <= 0xFF:
        raise ValueError("divisor must fit in one byte")
    if divisor == 0:
        raise ZeroDivisionError("Division by zero!")
    data = _as_bytes(a)
    quotient, remainder = divmod(_value(data), divisor)
    return _pack(quotient, len(data)), remainder


def divide(a: ByteLike, b: ByteLike) -> tuple[bytes, bytes]:
    """Return ``(quotient, remainder)`` of ``a`` divided by ``b``, both full width."""
    left, right = _pair(a, b)
    divisor = _value(right)
    if divisor == 0:
        raise ZeroDivisionError("Division by zero!")
    quotient, remainder = divmod(_value(left), divisor)
    return _pack(quotient, len(left)), _pack(remainder, len(left))


def to_hex(a: ByteLike) -> str:
    """Render ``a`` in hexadecimal, two digits per byte from the highest non-zero byte."""
    data = _as_bytes(a)
    return data[: high_index(data) + 1][::-1].hex()


def to_decimal(a: ByteLike) -> str:
    """Render ``a`` in decimal."""
    return str(_value(a))


def parse_decimal(text: str, size: int) -> bytes:
    """Read leading decimal digits of ``text`` into a number ``size`` bytes wide.

    Reading stops at the first character that is not an ASCII digit; text
    with no leading digit gives zero.  Values too large for the width wrap.
    """
    if size < 1:
        raise ValueError("size must be at least one byte")
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", text))
    return _pack(int(digits) if digits else 0, size)