import math
import struct
from fractions import Fraction

import pytest

from numkit.fraction import INT_MAX, float_to_fraction, float_to_fraction_shift, main


def _single(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _exact(numerator, shift):
    return Fraction(numerator) * Fraction(2) ** (-shift)


def test_shift_of_three_quarters():
    assert float_to_fraction_shift(0.75) == (3, 2)


def test_shift_of_one():
    assert float_to_fraction_shift(1.0) == (1, 0)


def test_shift_negative_value_mirrors_positive():
    numerator, shift = float_to_fraction_shift(0.75)
    assert float_to_fraction_shift(-0.75) == (-numerator, shift)


@pytest.mark.parametrize("x", [0.1, 3.14159265, 1e-5, 123456.789, 2.0**30, -7.25])
def test_shift_is_exact_and_odd(x):
    numerator, shift = float_to_fraction_shift(x)
    assert numerator % 2 == 1
    assert _exact(numerator, shift) == Fraction(_single(x))


def test_large_value_has_negative_shift():
    numerator, shift = float_to_fraction_shift(2.0**30)
    assert (numerator, shift) == (1, -30)


def test_half():
    assert float_to_fraction(0.5) == (1, 2)


def test_negative_value():
    numerator, denominator = float_to_fraction(-0.5)
    assert (numerator, denominator) == (-1, 2)


def test_too_large():
    assert float_to_fraction(1e10) == (INT_MAX, 1)
    assert INT_MAX == 2147483647


def test_too_small():
    assert float_to_fraction(1e-12) == (0, INT_MAX)
    assert float_to_fraction(0.0) == (0, INT_MAX)


def test_large_integer_returned_directly():
    assert float_to_fraction(2.0**24) == (16777216, 1)


@pytest.mark.parametrize("x", [3.14159265, 0.1, 0.333333, 2.718281828, -1.4142135, 0.001])
def test_result_is_close_and_reduced(x):
    numerator, denominator = float_to_fraction(x)
    assert 1 <= denominator < 20000
    assert math.gcd(abs(numerator), denominator) == 1
    assert abs(Fraction(numerator, denominator) - Fraction(x)) <= Fraction(
        1, 2 * denominator
    ) + Fraction(1, 10**6)


def test_limit_bounds_denominator():
    numerator, denominator = float_to_fraction(3.14159265, 10)
    assert denominator < 10
    assert abs(numerator / denominator - 3.14159265) < 0.01


def test_limit_too_small_raises():
    with pytest.raises(ValueError):
        float_to_fraction(0.3, 1)


def test_main_prints_fraction(capsys):
    assert main(["0.5"]) == 0
    assert capsys.readouterr().out == "0.500000 = 1 / 2\n"


def test_main_prompts_on_stdin(capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda: "0.5")
    main([])
    assert capsys.readouterr().out == "Enter a number: 0.500000 = 1 / 2\n"