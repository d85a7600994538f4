from decimal_matcher.domain.services import DecimalNumberMatcher, DecimalParser
from decimal_matcher.domain.values import DecimalNumber, ValidationError, ValidationResult

__all__ = [
    "DecimalNumber",
    "DecimalNumberMatcher",
    "DecimalParser",
    "ValidationError",
    "ValidationResult",
]
