from typing import Any, Iterator

from .validation_error import ValidationError


class ValidationResult:
    """
    Ordered collection of coded validation errors produced by a single rule.

    Errors are kept in the order they were added. An empty result means
    the value satisfied every enabled constraint.
    """

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def add_error(self, error: ValidationError) -> None:
        self._errors.append(error)

    def add_invalid_type_error(self, code: str, message: str) -> None:
        self.add_error(ValidationError(code=code, message=message))

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def codes(self) -> list[str]:
        return [error.code for error in self._errors]

    def has_code(self, code: str) -> bool:
        return any(error.code == code for error in self._errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [error.to_dict() for error in self._errors],
        }

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self.codes()!r})"
