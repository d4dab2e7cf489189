import math

import pytest

from reggie_utils import numbers
from reggie_utils.errors import AbsenceError, IllegalArgumentError


def test_to_int():
    assert numbers.to_int(None, 1) == 1
    assert numbers.to_int("", 1) == 1
    assert numbers.to_int("1", 0) == 1
    assert numbers.to_int("  -42  ") == -42
    assert numbers.to_int("+7") == 7
    assert numbers.to_int("12px") == 12
    assert numbers.to_int("3.9") == 3
    assert numbers.to_int("abc", 5) == 5
    assert numbers.to_int("-", 5) == 5
    assert numbers.to_int(15.7) == 15


def test_to_int_radix():
    assert numbers.to_int("ff", radix=16) == 255
    assert numbers.to_int("0xFF", radix=16) == 255
    assert numbers.to_int("101", radix=2) == 5
    assert numbers.to_int("102", radix=2) == 2
    assert numbers.to_int("z", radix=36) == 35
    with pytest.raises(IllegalArgumentError):
        numbers.to_int("1", radix=1)
    with pytest.raises(IllegalArgumentError):
        numbers.to_int("1", radix=37)


def test_to_float():
    assert numbers.to_float(None, 1.1) == 1.1
    assert numbers.to_float("", 1.1) == 1.1
    assert numbers.to_float("1.5", 0.0) == 1.5
    assert numbers.to_float(" -2.5e3kg ") == -2500.0
    assert numbers.to_float(".5") == 0.5
    assert numbers.to_float("7.") == 7.0
    assert numbers.to_float("Infinity") == math.inf
    assert numbers.to_float("nope", 2.0) == 2.0


def test_to_float_numbers():
    assert numbers.to_float(math.inf) == math.inf
    assert numbers.to_float(-math.inf) == -math.inf
    assert numbers.to_float(3) == 3.0
    assert numbers.to_float(1e21) == 1e21
    assert math.isnan(numbers.to_float(math.nan))
    assert numbers.to_float(True, 4.0) == 4.0


def test_sum_average():
    assert numbers.sum(1, 2, 3) == 6
    assert numbers.average(1, 2, 3, 4) == 2.5
    with pytest.raises(AbsenceError):
        numbers.sum()
    with pytest.raises(AbsenceError):
        numbers.average()


def test_median():
    assert numbers.median(3, 1, 2) == 2
    assert numbers.median(4, 1, 3, 2) == 2.5
    assert numbers.median(7) == 7
    with pytest.raises(AbsenceError):
        numbers.median()


def test_median_does_not_sort_input():
    values = [3, 1, 2]
    numbers.median(*values)
    assert values == [3, 1, 2]


def test_mode():
    assert numbers.mode([1, 2, 2, 3, 2]) == 2
    assert numbers.mode([5]) == 5
    assert numbers.mode([]) == -1


def test_round():
    assert numbers.round(1.005, 2) == 1.01
    assert numbers.round(2.5) == 3.0
    assert numbers.round(-2.5) == -2.0
    assert numbers.round(1.2345, 3) == 1.235
    assert numbers.round(1.2345, 3.9) == 1.235
    assert numbers.round(12) == 12.0
    with pytest.raises(IllegalArgumentError):
        numbers.round(1.5, -1)
    with pytest.raises(IllegalArgumentError):
        numbers.round(1.5, 21)


def test_to_fixed():
    assert numbers.to_fixed(1.239, 2) == 1.23
    assert numbers.to_fixed(1.9) == 1.0
    assert numbers.to_fixed(-1.55, 1) == -1.6
    assert math.isnan(numbers.to_fixed(math.nan, 2))
    with pytest.raises(IllegalArgumentError):
        numbers.to_fixed(1.5, 20.5)
