from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest
from decimal_matcher.domain.values import DecimalNumber


@pytest.mark.parametrize(
    "text, total, fractional",
    [
        ("123.45", 5, 2),
        ("0.001", 1, 3),
        ("0.5", 1, 1),
        ("00.50", 2, 2),
        ("5.00", 3, 2),
        ("123.450", 6, 3),
        ("1000", 4, 0),
        ("1E3", 4, 0),
        ("1.5E-3", 2, 4),
        ("0", 1, 0),
        ("-0.00", 1, 2),
        ("-42.7", 3, 1),
        ("0E5", 1, 0),
        ("0.000E-2", 1, 5),
    ],
)
def test_digit_counts(text, total, fractional):
    number = DecimalNumber(Decimal(text))

    assert number.total_digits() == total
    assert number.fractional_digits() == fractional


def test_non_finite_values_are_rejected():
    with pytest.raises(ValueError):
        DecimalNumber(Decimal("NaN"))

    with pytest.raises(ValueError):
        DecimalNumber(Decimal("Infinity"))


def test_str_keeps_literal_form():
    assert str(DecimalNumber(Decimal("5.00"))) == "5.00"


def test_decimal_number_is_immutable():
    number = DecimalNumber(Decimal("1"))

    with pytest.raises(FrozenInstanceError):
        number.value = Decimal("2")
