"""Percent value object.

A ``Percent`` extracts a percentage of a monetary amount: for 10%,
``EUR 2.35`` becomes ``EUR 0.235``. The percentage is stored as a rate
(the input divided by 100) computed once, under a decimal context that
defaults to ``DEFAULT_MATH_CONTEXT`` and can be overridden per instance.
"""

from dataclasses import InitVar, dataclass, field
from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from typing import Optional

from babel import Locale, UnknownLocaleError, default_locale
from babel.numbers import format_percent

from money_percent.domain.capabilities import Displayable, LocaleLike, MonetaryAdjuster
from money_percent.domain.value_objects.money import Money, Number

# Equivalent to IEEE 754 decimal64. Pass another Context to Percent to override.
# Percent works on a copy, so this constant never collects flags.
DEFAULT_MATH_CONTEXT = Context(prec=16, rounding=ROUND_HALF_EVEN)

# Used when the environment defines no locale, or one Babel cannot load
FALLBACK_LOCALE = "en_US"

ONE_HUNDRED = Decimal(100)


def resolve_default_locale() -> str:
    """
    Resolve the process default locale for number formatting.

    Returns:
        Locale identifier from LC_NUMERIC/LANGUAGE/LC_ALL/LC_CTYPE/LANG,
        or FALLBACK_LOCALE when none is set or Babel does not know it
    """
    identifier = default_locale("LC_NUMERIC")
    if not identifier:
        return FALLBACK_LOCALE
    try:
        Locale.parse(identifier)
    except (UnknownLocaleError, ValueError):
        return FALLBACK_LOCALE
    return identifier


@dataclass(frozen=True)
class Percent(MonetaryAdjuster, Displayable):
    """Percentage of a monetary amount (e.g., value=3 means 3%)."""

    value: Decimal
    context: InitVar[Optional[Context]] = None
    rate: Decimal = field(init=False)  # value / 100, e.g. 0.03

    def __post_init__(self, context: Optional[Context]) -> None:
        """Compute the rate under the given context."""
        ctx = (context if context is not None else DEFAULT_MATH_CONTEXT).copy()
        value = self.value if isinstance(self.value, Decimal) else ctx.create_decimal(self.value)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "rate", ctx.divide(value, ONE_HUNDRED))

    def adjust(self, amount: Money) -> Money:
        """
        Get the percentage of the amount.

        Args:
            amount: Monetary amount

        Returns:
            New amount of the same currency, amount * rate
        """
        return amount * self.rate

    def format(self, locale: Optional[LocaleLike] = None) -> str:
        """
        Format the rate as a percentage.

        Args:
            locale: Babel locale or identifier; the process default if None

        Returns:
            Locale-formatted percentage (e.g., '3%' for en_US)
        """
        if locale is None:
            locale = resolve_default_locale()
        # Babel scales and quantizes under the ambient context; widen it for large rates
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.rate.adjusted() + 5)
            return format_percent(self.rate, locale=locale)

    def display_name(self, locale: LocaleLike) -> str:
        """Format the rate as a percentage for the given locale."""
        return self.format(locale)

    def __str__(self) -> str:
        return self.format()


def percent(value: Number, context: Optional[Context] = None) -> Percent:
    """
    Create a Percent.

    Args:
        value: Percentage, e.g. 3 for 3%
        context: Decimal context for the rate; DEFAULT_MATH_CONTEXT if None

    Returns:
        Percent instance
    """
    return Percent(value, context)
