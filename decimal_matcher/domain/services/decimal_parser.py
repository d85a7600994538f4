import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from decimal_matcher.domain.exceptions import InvalidDecimalError
from decimal_matcher.domain.values import DecimalNumber

# ASCII digits only, "." as the sole separator, optional exponent.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ParsedNumber:
    number: DecimalNumber


@dataclass(frozen=True)
class ParseFailure:
    text: object
    reason: str


ParseOutcome = Union[ParsedNumber, ParseFailure]


class DecimalParser:
    """
    Parses strings into exact decimal numbers.

    Parsing never raises: the outcome is either a ``ParsedNumber`` or a
    ``ParseFailure`` describing why the text was rejected. Literals whose
    exponent lies outside what ``Decimal`` can represent are failures too.
    """

    def parse(self, text: object) -> ParseOutcome:
        """
        Parse text as an exact decimal number.

        :param text: Raw input, expected to be a string
        :return: ParsedNumber on success, ParseFailure otherwise
        """
        if not isinstance(text, str):
            return ParseFailure(text, f"expected a string, got {type(text).__name__}")

        if not text:
            return ParseFailure(text, "empty string")

        if _DECIMAL_PATTERN.fullmatch(text) is None:
            return ParseFailure(text, "not a decimal literal")

        try:
            value = Decimal(text)
        except InvalidOperation:
            return ParseFailure(text, "exponent out of representable range")

        return ParsedNumber(DecimalNumber(value))

    def parse_or_raise(self, text: object) -> DecimalNumber:
        """
        Parse text, raising instead of returning a failure.

        :raises InvalidDecimalError: if text is not a valid decimal number
        """
        outcome = self.parse(text)

        if isinstance(outcome, ParseFailure):
            raise InvalidDecimalError(outcome.text, outcome.reason)

        return outcome.number
