"""Capability interfaces shared by domain value objects."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

from babel import Locale

if TYPE_CHECKING:
    from money_percent.domain.value_objects.money import Money

LocaleLike = Union[Locale, str]


class MonetaryAdjuster(ABC):
    """Capability of turning one monetary amount into another."""

    @abstractmethod
    def adjust(self, amount: "Money") -> "Money":
        """
        Adjust a monetary amount.

        Args:
            amount: Amount to adjust (left untouched)

        Returns:
            New adjusted amount
        """
        pass


class Displayable(ABC):
    """Capability of rendering a value for a given locale."""

    @abstractmethod
    def display_name(self, locale: LocaleLike) -> str:
        """
        Render the value for display.

        Args:
            locale: Babel locale or identifier (e.g., 'en_US')

        Returns:
            Locale-formatted string
        """
        pass
