from decimal import Decimal

import pytest
from decimal_matcher.domain.exceptions import DomainException, InvalidDecimalError
from decimal_matcher.domain.services.decimal_parser import (
    DecimalParser,
    ParsedNumber,
    ParseFailure,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("+7", Decimal("7")),
        ("0", Decimal("0")),
        (".5", Decimal("0.5")),
        ("5.", Decimal("5")),
        ("00.50", Decimal("0.50")),
        ("1e3", Decimal("1E+3")),
        ("1.5E-3", Decimal("0.0015")),
        ("12345678901234567890.123456789", Decimal("12345678901234567890.123456789")),
    ],
)
def test_parse_accepts_decimal_literals(text, expected):
    outcome = DecimalParser().parse(text)

    assert isinstance(outcome, ParsedNumber)
    assert outcome.number.value == expected


def test_parse_keeps_exact_representation():
    outcome = DecimalParser().parse("5.00")

    assert isinstance(outcome, ParsedNumber)
    assert str(outcome.number) == "5.00"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "abc",
        "not-a-number",
        "1.2.3",
        "--5",
        "+-5",
        " 5",
        "5 ",
        "1,000",
        "1_000",
        "1 000",
        "12,5",
        "NaN",
        "Infinity",
        "-inf",
        "0x1A",
        "1e",
        "e5",
        ".",
        "-",
        "12a",
        "١٢",
    ],
)
def test_parse_rejects_malformed_text(text):
    outcome = DecimalParser().parse(text)

    assert isinstance(outcome, ParseFailure)
    assert outcome.text == text
    assert outcome.reason


@pytest.mark.parametrize("value", [12.5, 3, Decimal("1.5"), b"1.5", object()])
def test_parse_rejects_non_string_input(value):
    outcome = DecimalParser().parse(value)

    assert isinstance(outcome, ParseFailure)
    assert "expected a string" in outcome.reason


def test_parse_or_raise_returns_number():
    number = DecimalParser().parse_or_raise("1.25")

    assert number.value == Decimal("1.25")
    assert number.fractional_digits() == 2


def test_parse_or_raise_raises_domain_error():
    with pytest.raises(InvalidDecimalError) as exc_info:
        DecimalParser().parse_or_raise("1.2.3")

    assert isinstance(exc_info.value, DomainException)
    assert exc_info.value.text == "1.2.3"
    assert "1.2.3" in str(exc_info.value)


@pytest.mark.parametrize("text", ["1e9999999999999999999", "1e-9999999999999999999"])
def test_parse_rejects_exponent_outside_decimal_range(text):
    outcome = DecimalParser().parse(text)

    assert isinstance(outcome, ParseFailure)
    assert outcome.reason == "exponent out of representable range"
