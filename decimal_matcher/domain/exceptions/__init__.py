from .base import DomainException
from .parsing import InvalidDecimalError, ParsingError

__all__ = [
    "DomainException",
    "InvalidDecimalError",
    "ParsingError",
]
