"""
String-parametrized factories for number types.

``number_factory`` selects a constructor by ``NumberType``; the constructor
parses a textual integer into the product. Malformed text raises
``InvalidPayload`` instead of producing a default value.
"""
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional
import numpy as np
from utils.logging_config import get_logger
from utils.exceptions import InvalidPayload
from .registry import ConstructionRegistry

logger = get_logger(__name__)

_INTEGER_PATTERN = re.compile(r'\s*([+-]?[0-9]+)\s*')

_INT64 = np.iinfo(np.int64)


class NumberType(Enum):
    """Representation a number is built into."""
    NEXT_STEP = 'next_step'
    NATIVE = 'native'


class Decimal(ABC):
    """Number capability."""

    @abstractmethod
    def string_value(self) -> str:
        """Display string including the number's type."""
        pass


class NextStepNumber(Decimal):
    """Number boxed as a 64-bit integer."""

    def __init__(self, value: np.int64):
        self.value = value

    def string_value(self) -> str:
        return f"NextStepNumber: {int(self.value)}"


class NativeNumber(Decimal):
    """Number held as an arbitrary-precision Python int."""

    def __init__(self, value: int):
        self.value = value

    def string_value(self) -> str:
        return f"NativeNumber: {self.value}"


NumberFactory = Callable[[str], Decimal]


def parse_integer(text: str) -> int:
    """
    Parse a textual integer.

    Accepts surrounding whitespace, an optional sign and ASCII digits only.

    Raises:
        InvalidPayload: If the text is not an integer literal
    """
    if not isinstance(text, str):
        raise InvalidPayload(
            text,
            message=f"Expected a string payload, got {type(text).__name__}",
            details={'actual_type': type(text).__name__}
        )

    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidPayload(text, details={'expected': 'integer literal'})

    try:
        return int(match.group(1))
    except ValueError as e:
        # Interpreter limit on digit count for str-to-int conversion
        raise InvalidPayload(
            text,
            message=f"Integer literal of {len(match.group(1))} characters is too long",
            details={'expected': 'integer literal', 'error': str(e)}
        ) from e


def make_next_step_number(text: str) -> Decimal:
    """Build a NextStepNumber from text."""
    value = parse_integer(text)
    if not _INT64.min <= value <= _INT64.max:
        raise InvalidPayload(
            text,
            message=f"{text!r} does not fit in a 64-bit integer",
            details={'min': int(_INT64.min), 'max': int(_INT64.max)}
        )
    return NextStepNumber(np.int64(value))


def make_native_number(text: str) -> Decimal:
    """Build a NativeNumber from text."""
    return NativeNumber(parse_integer(text))


NUMBER_FACTORIES: ConstructionRegistry[Decimal] = ConstructionRegistry(
    NumberType,
    {
        NumberType.NEXT_STEP: make_next_step_number,
        NumberType.NATIVE: make_native_number,
    },
    name='numbers',
    total=True
)


def number_factory(number_type: NumberType) -> Optional[NumberFactory]:
    """Return the string constructor for a number type."""
    return NUMBER_FACTORIES.constructor_for(number_type)


def make_number(number_type: NumberType, text: str) -> Optional[Decimal]:
    """Parse text into the number type's representation."""
    number = NUMBER_FACTORIES.resolve_from_string(number_type, text)
    if number is not None:
        logger.debug(f"Parsed {text!r} as {number.string_value()}")
    return number
