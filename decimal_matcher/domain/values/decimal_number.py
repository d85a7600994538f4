from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DecimalNumber:
    """
    Exact decimal parsed from user input.

    Digits are counted on the coefficient exactly as written, so literal
    trailing zeros count ("5.00" has 3 digits, 2 of them fractional) while
    leading zeros never do ("00.50" has 2 digits).
    """

    value: Decimal

    def __post_init__(self):
        if not self.value.is_finite():
            raise ValueError(f"Decimal number must be finite: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    def total_digits(self) -> int:
        """Significant digits, including integer zeros implied by a positive exponent."""
        if self.value.is_zero():
            return 1

        _, digits, exponent = self.value.as_tuple()
        return len(digits) + max(0, exponent)

    def fractional_digits(self) -> int:
        _, _, exponent = self.value.as_tuple()
        return max(0, -exponent)
