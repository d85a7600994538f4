from dataclasses import dataclass
from typing import Optional

from decimal_matcher.domain.services.decimal_parser import DecimalParser, ParseFailure
from decimal_matcher.domain.values import DecimalNumber, ValidationError, ValidationResult
from decimal_matcher.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DIGITS = 11


# Codes are a stable contract with callers; never renumber them.
PARSING_NUMBER_ERROR = ValidationError(
    code="doubleNumber.e001",
    message="The value is not a valid decimal number.",
)
MAX_DIGITS_ERROR = ValidationError(
    code="doubleNumber.e002",
    message="The value exceeded maximum number of digits.",
)
MAX_DECIMAL_PLACES_ERROR = ValidationError(
    code="doubleNumber.e003",
    message="The value exceeded maximum number of decimal places.",
)


@dataclass(frozen=True)
class DigitsPolicy:
    """
    Digit limits enforced by the matcher.

    Not validated: a non-positive ``max_digits`` makes every number fail.
    ``max_decimal_places=None`` disables the decimal places check, while
    ``0`` forbids any fractional digit.
    """

    max_digits: int = DEFAULT_MAX_DIGITS
    max_decimal_places: Optional[int] = None


class DecimalNumberMatcher:
    """
    Matcher validates that a string value represents a decimal number or None.
    Decimal separator is always ".".

    Digit and decimal place limits are checked independently, so a single
    value may produce both errors.
    """

    def __init__(
        self,
        max_digits: int = DEFAULT_MAX_DIGITS,
        max_decimal_places: Optional[int] = None,
        parser: DecimalParser = None,
    ):
        self._policy = DigitsPolicy(
            max_digits=max_digits, max_decimal_places=max_decimal_places
        )
        self._parser = parser or DecimalParser()

    @classmethod
    def from_policy(
        cls, policy: DigitsPolicy, parser: DecimalParser = None
    ) -> "DecimalNumberMatcher":
        return cls(
            max_digits=policy.max_digits,
            max_decimal_places=policy.max_decimal_places,
            parser=parser,
        )

    @property
    def policy(self) -> DigitsPolicy:
        return self._policy

    def match(self, value: Optional[str]) -> ValidationResult:
        """
        Validate a single value.

        :param value: Raw string value, or None
        :return: ValidationResult, empty when value is None or valid
        """
        result = ValidationResult()

        if value is None:
            return result

        number = self._parse_number(value, result)

        if number is not None:
            self._validate_digits(number, result)
            self._validate_decimal_places(number, result)

        logger.debug(
            "decimal_value_matched",
            max_digits=self._policy.max_digits,
            max_decimal_places=self._policy.max_decimal_places,
            errors=result.codes(),
        )

        return result

    def _parse_number(
        self, value: str, result: ValidationResult
    ) -> Optional[DecimalNumber]:
        outcome = self._parser.parse(value)

        if isinstance(outcome, ParseFailure):
            logger.debug("decimal_value_unparseable", reason=outcome.reason)
            result.add_error(PARSING_NUMBER_ERROR)
            return None

        return outcome.number

    def _validate_digits(self, number: DecimalNumber, result: ValidationResult) -> None:
        if number.total_digits() > self._policy.max_digits:
            result.add_error(MAX_DIGITS_ERROR)

    def _validate_decimal_places(
        self, number: DecimalNumber, result: ValidationResult
    ) -> None:
        max_decimal_places = self._policy.max_decimal_places

        if max_decimal_places is None:
            return

        if number.fractional_digits() > max_decimal_places:
            result.add_error(MAX_DECIMAL_PLACES_ERROR)
