from .base import DomainException


class ParsingError(DomainException):
    """Base exception for number parsing errors."""

    pass


class InvalidDecimalError(ParsingError):
    """Raised when a string does not denote a finite decimal number."""

    def __init__(self, text: object, reason: str):
        self.text = text
        self.reason = reason

        super().__init__(f"Invalid decimal number {text!r}: {reason}")
