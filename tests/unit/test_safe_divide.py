from decimal import Decimal
from fractions import Fraction
import math

import numpy as np
import pytest

from safediv_core import (
    FloorNumeric,
    Nothing,
    Numeric,
    Some,
    is_nothing,
    is_some,
    safe_divide,
    safe_floor_divide,
)


class _CountingNumber:
    """Numeric stand-in that records every division performed on it."""

    def __init__(self, value: int, log: list[str]):
        self.value = value
        self.log = log

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _CountingNumber):
            return self.value == other.value
        return self.value == other

    def __truediv__(self, other: "_CountingNumber") -> "_CountingNumber":
        self.log.append("truediv")
        return _CountingNumber(self.value // other.value, self.log)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (10, 2, 5),
        (0, 5, 0),
        (-10, 2, -5),
        (7, 3, 7 / 3),
        (7.5, 2.5, 3.0),
    ],
)
def test_nonzero_divisor_is_present(a, b, expected):
    assert safe_divide(a, b) == Some(expected)


@pytest.mark.unit
@pytest.mark.parametrize("a", [10, 0, -3, 1.5])
def test_zero_divisor_is_absent(a):
    assert safe_divide(a, 0) == Nothing()


@pytest.mark.unit
@pytest.mark.parametrize(
    "zero",
    [0, 0.0, -0.0, 0j, Decimal("0"), Decimal("-0.00"), Fraction(0), np.float32(0), np.int64(0)],
)
def test_every_zero_flavour_is_absent(zero):
    assert is_nothing(safe_divide(type(zero)(1), zero))


@pytest.mark.unit
def test_integer_true_division_follows_python_semantics():
    match safe_divide(7, 3):
        case Some(value):
            assert isinstance(value, float)
            assert value == pytest.approx(2.3333333333)
        case _:
            pytest.fail("expected a quotient")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("a", "b"),
    [
        (Decimal("7"), Decimal("3")),
        (Fraction(7), Fraction(3)),
        (1 + 2j, 3 - 1j),
        (np.float32(7), np.float32(2)),
        (np.float64(-1), np.float64(8)),
    ],
)
def test_quotient_keeps_the_operand_type(a, b):
    result = safe_divide(a, b)
    assert result == Some(a / b)
    assert type(result.value) is type(a / b)


@pytest.mark.unit
def test_fraction_quotient_is_exact():
    assert safe_divide(Fraction(7), Fraction(3)) == Some(Fraction(7, 3))


@pytest.mark.unit
def test_zero_divisor_skips_division():
    log: list[str] = []
    assert safe_divide(_CountingNumber(4, log), _CountingNumber(0, log)) == Nothing()
    assert log == []

    assert is_some(safe_divide(_CountingNumber(4, log), _CountingNumber(2, log)))
    assert log == ["truediv"]


@pytest.mark.unit
def test_repeated_calls_are_identical():
    assert safe_divide(22, 7) == safe_divide(22, 7)
    assert safe_divide(22, 0) == safe_divide(22, 0)


@pytest.mark.unit
def test_nan_divisor_is_not_zero():
    result = safe_divide(1.0, float("nan"))
    assert is_some(result)
    assert math.isnan(result.value)


@pytest.mark.unit
def test_overflow_of_the_type_propagates():
    with pytest.raises(OverflowError):
        safe_divide(10**400, 3)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (7, 3, 2),
        (-7, 2, -4),
        (0, 9, 0),
        (7.5, 2.0, 3.0),
        (Decimal("7"), Decimal("2"), Decimal("3")),
    ],
)
def test_floor_divide_present(a, b, expected):
    assert safe_floor_divide(a, b) == Some(expected)


@pytest.mark.unit
@pytest.mark.parametrize("zero", [0, 0.0, Decimal("0"), np.int64(0)])
def test_floor_divide_zero_divisor_is_absent(zero):
    assert safe_floor_divide(type(zero)(5), zero) == Nothing()


@pytest.mark.unit
def test_floor_divide_keeps_integer_type():
    result = safe_floor_divide(np.int64(7), np.int64(3))
    assert result == Some(np.int64(2))
    assert isinstance(result.value, np.int64)


@pytest.mark.unit
def test_numeric_protocols_are_runtime_checkable():
    for value in (1, 1.0, 1j, Decimal(1), Fraction(1), np.float32(1)):
        assert isinstance(value, Numeric)
    assert isinstance(5, FloorNumeric)
    assert not isinstance(1j, FloorNumeric)
    assert not isinstance("10", Numeric)


@pytest.mark.unit
def test_fixed_width_overflow_is_left_to_numpy():
    with np.errstate(over="ignore"):
        expected = np.int8(-128) // np.int8(-1)
        result = safe_floor_divide(np.int8(-128), np.int8(-1))
    assert result == Some(expected)
    assert isinstance(result.value, np.int8)
