"""Signed arbitrary-size integers stored as 64-bit limbs."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest

_LIMB_BITS = 64
_LIMB_BYTES = 8
_MASK = (1 << _LIMB_BITS) - 1


def _to_limbs(magnitude: int) -> list[int]:
    limbs = []
    while True:
        limbs.append(magnitude & _MASK)
        magnitude >>= _LIMB_BITS
        if not magnitude:
            return limbs


def _trim(limbs: list[int]) -> list[int]:
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _ucompare(a: list[int], b: list[int]) -> int:
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return 1 if x > y else -1
    return 0


def _uadd(a: list[int], b: list[int]) -> list[int]:
    out = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        total = x + y + carry
        out.append(total & _MASK)
        carry = total >> _LIMB_BITS
    if carry:
        out.append(carry)
    return out


def _usub(larger: list[int], smaller: list[int]) -> list[int]:
    out = []
    borrow = 0
    for x, y in zip_longest(larger, smaller, fillvalue=0):
        diff = x - y - borrow
        borrow = 1 if diff < 0 else 0
        out.append(diff & _MASK)
    return _trim(out)


@total_ordering
class Integer:
    """A signed integer held as a magnitude of 64-bit limbs and a sign."""

    __slots__ = ("_limbs", "_negative")

    def __init__(self, value: int | Integer = 0) -> None:
        if isinstance(value, Integer):
            self._limbs = list(value._limbs)
            self._negative = value._negative
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot make an Integer from {type(value).__name__}")
        self._limbs = _to_limbs(abs(value))
        self._negative = value < 0

    @classmethod
    def _from_limbs(cls, limbs: list[int], negative: bool) -> Integer:
        result = cls.__new__(cls)
        result._limbs = _trim(limbs)
        result._negative = negative and result._limbs != [0]
        return result

    @staticmethod
    def _coerce(value: object) -> Integer:
        if isinstance(value, Integer):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Integer(value)
        raise TypeError(f"unsupported operand type: {type(value).__name__}")

    def size(self) -> int:
        """Return the storage size of the magnitude in bytes."""
        return len(self._limbs) * _LIMB_BYTES

    def compare(self, other: Integer | int) -> int:
        """Return 1, 0 or -1 as self is greater than, equal to or less than other."""
        other = self._coerce(other)
        if self._negative:
            if other._negative:
                return _ucompare(other._limbs, self._limbs)
            return -1
        if other._negative:
            return 1
        return _ucompare(self._limbs, other._limbs)

    def __neg__(self) -> Integer:
        return Integer._from_limbs(list(self._limbs), not self._negative)

    def __add__(self, other: Integer | int) -> Integer:
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        order = _ucompare(self._limbs, other._limbs)
        larger, smaller = (self, other) if order > 0 else (other, self)
        if larger._negative == smaller._negative:
            return Integer._from_limbs(_uadd(larger._limbs, smaller._limbs), larger._negative)
        if order == 0:
            return Integer(0)
        return Integer._from_limbs(_usub(larger._limbs, smaller._limbs), larger._negative)

    __radd__ = __add__

    def __sub__(self, other: Integer | int) -> Integer:
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: int) -> Integer:
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return other - self

    def __eq__(self, other: object) -> bool:
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Integer | int) -> bool:
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __int__(self) -> int:
        magnitude = 0
        for limb in reversed(self._limbs):
            magnitude = (magnitude << _LIMB_BITS) | limb
        return -magnitude if self._negative else magnitude

    __index__ = __int__

    def __repr__(self) -> str:
        return f"Integer({int(self)})"


def compare(a: Integer | int, b: Integer | int) -> int:
    """Return 1 if a > b, 0 if a == b and -1 if a < b."""
    return Integer._coerce(a).compare(b)