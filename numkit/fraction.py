"""Express single-precision floats as fractions."""

from __future__ import annotations

import math
import struct
import sys
from collections.abc import Sequence

INT_MAX = 2**31 - 1
DEFAULT_DENOMINATOR_LIMIT = 20000

_MANTISSA_MASK = 0x007FFFFF
_IMPLICIT_BIT = 0x00800000
_EXPONENT_BIAS = 127
_MANTISSA_BITS = 23


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _exponent(bits: int) -> int:
    return ((bits >> _MANTISSA_BITS) & 0xFF) - _EXPONENT_BIAS


def float_to_fraction_shift(x: float) -> tuple[int, int]:
    """Return ``(numerator, shift)`` with ``x == numerator / 2**shift`` exactly.

    ``x`` is taken at single precision.  The numerator is odd; ``shift`` may
    be negative for large values.
    """
    bits = _bits(x)
    numerator = (bits & _MANTISSA_MASK) | _IMPLICIT_BIT
    shift = _MANTISSA_BITS - _exponent(bits)
    trailing = (numerator & -numerator).bit_length() - 1
    numerator >>= trailing
    shift -= trailing
    return (-numerator if _f32(x) < 0.0 else numerator), shift


def _distance(target: float, numerator: int, denominator: int) -> float:
    quotient = _f32(_f32(numerator) / _f32(denominator))
    return _f32(abs(target - quotient))


def float_to_fraction(
    x: float, denominator_limit: int = DEFAULT_DENOMINATOR_LIMIT
) -> tuple[int, int]:
    """Return the closest ``(numerator, denominator)`` found for ``x``.

    Denominators below ``denominator_limit`` are tried.  Values too large
    for a 32-bit numerator give ``(INT_MAX, 1)``; values too small give
    ``(0, INT_MAX)``.
    """
    x32 = _f32(x)
    exponent = _exponent(_bits(x32))

    if exponent >= _MANTISSA_BITS:
        if exponent >= 31:
            return INT_MAX, 1
        return int(x32), 1

    if exponent < -31:
        return 0, INT_MAX

    limit = INT_MAX if exponent < -8 else 1 << (_MANTISSA_BITS - exponent)
    limit = min(limit, denominator_limit)
    if limit < 2:
        raise ValueError("denominator_limit must be at least 2")

    abs_x = abs(x32)
    n = 0
    best_numerator, best_denominator = 0, 1
    min_diff = math.inf

    for d in range(1, limit):
        if min_diff == 0.0:
            break
        diff = _distance(abs_x, n, d)
        while (following := _distance(abs_x, n + 1, d)) <= diff:
            diff = following
            n += 1
        if diff >= min_diff:
            continue
        divisor = math.gcd(d, n)
        best_numerator, best_denominator = n // divisor, d // divisor
        min_diff = diff

    if x32 < 0.0:
        best_numerator = -best_numerator
    return best_numerator, best_denominator


def main(argv: Sequence[str] | None = None) -> int:
    """Print a fraction for a number given as an argument or on standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        text = args[0]
    else:
        print("Enter a number: ", end="", flush=True)
        text = input()
    numerator, denominator = float_to_fraction(float(text))
    value = _f32(_f32(numerator) / _f32(denominator))
    print(f"{value:.6f} = {numerator} / {denominator}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())