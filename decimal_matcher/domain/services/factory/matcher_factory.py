from typing import Optional

from decimal_matcher.domain.services.decimal_number_matcher import (
    DecimalNumberMatcher,
    DigitsPolicy,
)
from decimal_matcher.domain.services.decimal_parser import DecimalParser


class DecimalNumberMatcherFactory:
    def __init__(
        self,
        default_policy: DigitsPolicy = None,
        parser: DecimalParser = None,
    ):
        self._default_policy = default_policy or DigitsPolicy()
        self._parser = parser or DecimalParser()

    @property
    def default_policy(self) -> DigitsPolicy:
        return self._default_policy

    def create(
        self,
        max_digits: Optional[int] = None,
        max_decimal_places: Optional[int] = None,
    ) -> DecimalNumberMatcher:
        """
        Build a matcher, falling back to the default policy for omitted limits.

        :param max_digits: Override for the maximum number of digits
        :param max_decimal_places: Override for the maximum number of decimal places
        :return: DecimalNumberMatcher sharing this factory's parser
        """
        policy = DigitsPolicy(
            max_digits=(
                self._default_policy.max_digits if max_digits is None else max_digits
            ),
            max_decimal_places=(
                self._default_policy.max_decimal_places
                if max_decimal_places is None
                else max_decimal_places
            ),
        )

        return DecimalNumberMatcher.from_policy(policy, parser=self._parser)

    @classmethod
    def from_settings(cls, settings) -> "DecimalNumberMatcherFactory":
        return cls(
            DigitsPolicy(
                max_digits=settings.DEFAULT_MAX_DIGITS,
                max_decimal_places=settings.DEFAULT_MAX_DECIMAL_PLACES,
            )
        )
