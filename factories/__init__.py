"""
Factory pattern playground: a construction registry and its demonstrations.
"""
from .registry import ConstructionRegistry, parse_discriminant
from .builder import RegistryBuilder
from .widgets import (
    Style,
    Button,
    Border,
    WidgetFactory,
    MacFactory,
    WinFactory,
    WIDGET_FACTORIES,
    widget_factory_for,
    create_widgets
)
from .numerics import (
    NumberType,
    Decimal,
    NextStepNumber,
    NativeNumber,
    NUMBER_FACTORIES,
    parse_integer,
    number_factory,
    make_number
)
from .fruit import (
    FruitKind,
    Fruit,
    FruitFactory,
    AppleFactory,
    PearFactory,
    ChestnutFactory,
    FRUIT_FACTORIES,
    fruit_factory_for,
    select_fruit
)
from .currency import (
    Country,
    Currency,
    CURRENCIES,
    currency_for
)
from .banks import (
    BankType,
    Bank,
    BANKS,
    select_bank
)

__all__ = [
    'ConstructionRegistry',
    'parse_discriminant',
    'RegistryBuilder',
    'Style',
    'Button',
    'Border',
    'WidgetFactory',
    'MacFactory',
    'WinFactory',
    'WIDGET_FACTORIES',
    'widget_factory_for',
    'create_widgets',
    'NumberType',
    'Decimal',
    'NextStepNumber',
    'NativeNumber',
    'NUMBER_FACTORIES',
    'parse_integer',
    'number_factory',
    'make_number',
    'FruitKind',
    'Fruit',
    'FruitFactory',
    'AppleFactory',
    'PearFactory',
    'ChestnutFactory',
    'FRUIT_FACTORIES',
    'fruit_factory_for',
    'select_fruit',
    'Country',
    'Currency',
    'CURRENCIES',
    'currency_for',
    'BankType',
    'Bank',
    'BANKS',
    'select_bank',
]
