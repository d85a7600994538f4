from dataclasses import dataclass
from typing import Optional

from decimal_matcher.domain.services.factory import DecimalNumberMatcherFactory
from decimal_matcher.domain.values import ValidationResult
from decimal_matcher.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchDecimalQuery:
    value: Optional[str]
    max_digits: Optional[int] = None
    max_decimal_places: Optional[int] = None


@dataclass(frozen=True)
class MatchDecimalResult:
    value: Optional[str]
    result: ValidationResult

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid

    def to_dict(self) -> dict:
        return {"value": self.value, **self.result.to_dict()}


class MatchDecimalQueryHandler:
    def __init__(self, matcher_factory: DecimalNumberMatcherFactory):
        self._factory = matcher_factory

    def handle(self, query: MatchDecimalQuery) -> MatchDecimalResult:
        """
        Validate a single value against the default or overridden digit limits.

        :param query: Query with the value and optional limit overrides
        :return: MatchDecimalResult holding the value and its validation result
        """
        matcher = self._factory.create(
            max_digits=query.max_digits,
            max_decimal_places=query.max_decimal_places,
        )

        result = matcher.match(query.value)

        if result.is_valid:
            logger.debug("decimal_value_accepted")
        else:
            logger.info("decimal_value_rejected", errors=result.codes())

        return MatchDecimalResult(value=query.value, result=result)
