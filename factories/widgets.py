"""
Abstract factory for families of UI widgets.

Each platform style has a factory that creates a matching button and border.
Callers only see the ``Button``/``Border`` interfaces.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple
from .registry import ConstructionRegistry


class Style(Enum):
    """Platform style of a widget family."""
    MAC = 'mac'
    WIN = 'win'


class Button(ABC):
    """Button capability."""

    @abstractmethod
    def name(self) -> str:
        """Display name of the button."""
        pass


class Border(ABC):
    """Border capability."""

    @abstractmethod
    def border_width(self) -> str:
        """Display string describing the border width."""
        pass


class MacButton(Button):
    def name(self) -> str:
        return "MacButton: I am Mac."


class WinButton(Button):
    def name(self) -> str:
        return "WinButton: I am Win."


class MacBorder(Border):
    width = 10

    def border_width(self) -> str:
        return f"MacBorder: I am {self.width}."


class WinBorder(Border):
    width = 12

    def border_width(self) -> str:
        return f"WinBorder: I am {self.width}."


class WidgetFactory(ABC):
    """Creates one family of related widgets."""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_border(self) -> Border:
        pass

    def create_widgets(self) -> Tuple[Button, Border]:
        """Create a matching button and border."""
        return self.create_button(), self.create_border()


class MacFactory(WidgetFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_border(self) -> Border:
        return MacBorder()


class WinFactory(WidgetFactory):
    def create_button(self) -> Button:
        return WinButton()

    def create_border(self) -> Border:
        return WinBorder()


WIDGET_FACTORIES: ConstructionRegistry[WidgetFactory] = ConstructionRegistry(
    Style,
    {
        Style.MAC: MacFactory,
        Style.WIN: WinFactory,
    },
    name='widgets',
    total=True
)


def widget_factory_for(style: Style) -> Optional[WidgetFactory]:
    """Return the widget factory for a platform style."""
    return WIDGET_FACTORIES.resolve(style)


def create_widgets(style: Style) -> Optional[Tuple[Button, Border]]:
    """Create the button and border pair for a platform style."""
    factory = widget_factory_for(style)
    if factory is None:
        return None
    return factory.create_widgets()
