from .decimal_number import DecimalNumber
from .validation_error import ValidationError
from .validation_result import ValidationResult

__all__ = [
    "DecimalNumber",
    "ValidationError",
    "ValidationResult",
]
