"""
Optional-result factory for currencies.

Not every country has a currency product; those resolve to ``None``.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
from .registry import ConstructionRegistry


class Country(Enum):
    UNITED_STATES = 'united_states'
    SPAIN = 'spain'
    UK = 'uk'
    GREECE = 'greece'


class Currency(ABC):
    """Currency capability."""

    @abstractmethod
    def symbol(self) -> str:
        """Display symbol of the currency."""
        pass


class Euro(Currency):
    def symbol(self) -> str:
        return "€"


class USDollar(Currency):
    def symbol(self) -> str:
        return "$"


# Greece is deliberately absent.
CURRENCIES: ConstructionRegistry[Currency] = ConstructionRegistry(
    Country,
    {
        Country.UNITED_STATES: USDollar,
        Country.SPAIN: Euro,
        Country.UK: Euro,
    },
    name='currency'
)


def currency_for(country: Country) -> Optional[Currency]:
    """Return the currency used in a country, or None if unsupported."""
    return CURRENCIES.resolve(country)
