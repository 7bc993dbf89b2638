"""Money value object."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from babel.numbers import format_currency, is_currency

from money_percent.domain.capabilities import Displayable, LocaleLike

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert a numeric value to Decimal, going through str() for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Money(Displayable):
    """Monetary amount in a given currency."""

    amount: Decimal
    currency: str  # ISO 4217 code, e.g. "EUR"

    def __post_init__(self) -> None:
        """Normalize amount and validate currency."""
        object.__setattr__(self, "amount", to_decimal(self.amount))
        code = self.currency.upper()
        if not is_currency(code):
            raise ValueError(f"Unknown currency code: {self.currency!r}")
        object.__setattr__(self, "currency", code)

    def __mul__(self, multiplier: Number) -> "Money":
        """Multiply money by a scalar."""
        if isinstance(multiplier, Money):
            raise TypeError("Cannot multiply two money amounts")
        if not isinstance(multiplier, (Decimal, int, float, str)):
            return NotImplemented
        return Money(self.amount * to_decimal(multiplier), self.currency)

    __rmul__ = __mul__

    def is_zero(self) -> bool:
        """Check whether the amount is zero."""
        return self.amount.is_zero()

    def display_name(self, locale: LocaleLike) -> str:
        """Render the amount with the currency format of the locale."""
        return format_currency(self.amount, self.currency, locale=locale)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"
