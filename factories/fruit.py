"""
Factory method hierarchy for fruit.

Each creator subclass decides which fruit ``select_fruit`` instantiates.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
from .builder import RegistryBuilder


class FruitKind(Enum):
    APPLE = 'apple'
    PEAR = 'pear'
    CHESTNUT = 'chestnut'


class Fruit(ABC):
    """Fruit capability."""

    def describe(self) -> str:
        """Display name of the fruit."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.describe()}()"


class Apple(Fruit):
    pass


class Pear(Fruit):
    pass


class Chestnut(Fruit):
    pass


class FruitFactory(ABC):
    """Creator declaring the factory method."""

    @abstractmethod
    def select_fruit(self) -> Fruit:
        """Create the fruit this creator is responsible for."""
        pass

    def serve(self) -> str:
        """Select a fruit and describe it."""
        return self.select_fruit().describe()


class AppleFactory(FruitFactory):
    def select_fruit(self) -> Fruit:
        return Apple()


class PearFactory(FruitFactory):
    def select_fruit(self) -> Fruit:
        return Pear()


class ChestnutFactory(FruitFactory):
    def select_fruit(self) -> Fruit:
        return Chestnut()


FRUIT_FACTORIES = (
    RegistryBuilder(FruitKind, name='fruit')
    .register(FruitKind.APPLE, AppleFactory)
    .register(FruitKind.PEAR, PearFactory)
    .register(FruitKind.CHESTNUT, ChestnutFactory)
    .build(total=True)
)


def fruit_factory_for(kind: FruitKind) -> Optional[FruitFactory]:
    """Return the fruit creator for a kind."""
    return FRUIT_FACTORIES.resolve(kind)


def select_fruit(kind: FruitKind) -> Optional[Fruit]:
    """Select a fruit through the creator registered for its kind."""
    factory = fruit_factory_for(kind)
    if factory is None:
        return None
    return factory.select_fruit()
