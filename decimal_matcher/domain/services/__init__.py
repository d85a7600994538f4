from .decimal_number_matcher import (
    DEFAULT_MAX_DIGITS,
    MAX_DECIMAL_PLACES_ERROR,
    MAX_DIGITS_ERROR,
    PARSING_NUMBER_ERROR,
    DecimalNumberMatcher,
    DigitsPolicy,
)
from .decimal_parser import DecimalParser, ParsedNumber, ParseFailure, ParseOutcome

__all__ = [
    "DEFAULT_MAX_DIGITS",
    "MAX_DECIMAL_PLACES_ERROR",
    "MAX_DIGITS_ERROR",
    "PARSING_NUMBER_ERROR",
    "DecimalNumberMatcher",
    "DecimalParser",
    "DigitsPolicy",
    "ParseFailure",
    "ParseOutcome",
    "ParsedNumber",
]
