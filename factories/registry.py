"""
Type-directed construction registry.

A registry maps the members of a closed ``Enum`` to constructors. Resolving a
member calls its constructor and returns the fresh product; resolving anything
else returns ``None``.
"""
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar
from utils.logging_config import get_logger
from utils.exceptions import UnsupportedDiscriminant, RegistrationError

logger = get_logger(__name__)

P = TypeVar('P')
E = TypeVar('E', bound=Enum)


class ConstructionRegistry(Generic[P]):
    """Read-only mapping from discriminant to product constructor."""

    def __init__(
        self,
        discriminant_type: Type[Enum],
        entries: Mapping[Enum, Callable[..., P]],
        name: Optional[str] = None,
        total: bool = False
    ):
        """
        Initialize registry.

        Args:
            discriminant_type: Enum whose members are valid discriminants
            entries: Constructor for each supported member
            name: Label used in log messages
            total: If True, every member of ``discriminant_type`` must be mapped
        """
        self.discriminant_type = discriminant_type
        self.name = name or discriminant_type.__name__

        foreign = [key for key in entries if not isinstance(key, discriminant_type)]
        if foreign:
            raise RegistrationError(
                f"{self.name} entries are not {discriminant_type.__name__} members",
                details={'foreign': [repr(key) for key in foreign]}
            )

        if total:
            missing = [member for member in discriminant_type if member not in entries]
            if missing:
                raise RegistrationError(
                    f"{self.name} has no constructor for {len(missing)} discriminant(s)",
                    details={'missing': [member.name for member in missing]}
                )

        self._entries = MappingProxyType(dict(entries))
        logger.debug(f"Created {self.name} registry with {len(self._entries)} entries")

    def constructor_for(self, discriminant: Any) -> Optional[Callable[..., P]]:
        """Return the constructor registered for a discriminant, if any."""
        if not isinstance(discriminant, self.discriminant_type):
            return None
        return self._entries.get(discriminant)

    def resolve(self, discriminant: Any) -> Optional[P]:
        """Construct a new product, or return None when none is registered."""
        constructor = self.constructor_for(discriminant)
        if constructor is None:
            logger.debug(f"{self.name}: no product for {discriminant!r}")
            return None
        return constructor()

    def require(self, discriminant: Any) -> P:
        """Construct a new product, raising when none is registered."""
        constructor = self.constructor_for(discriminant)
        if constructor is None:
            raise UnsupportedDiscriminant(
                discriminant,
                details={
                    'registry': self.name,
                    'available': [member.name for member in self._entries]
                }
            )
        return constructor()

    def resolve_from_string(self, discriminant: Any, payload: str) -> Optional[P]:
        """
        Construct a new product from a string payload.

        The constructor owns parsing; ``InvalidPayload`` raised by it propagates.
        """
        constructor = self.constructor_for(discriminant)
        if constructor is None:
            logger.debug(f"{self.name}: no product for {discriminant!r}")
            return None
        return constructor(payload)

    def supports(self, discriminant: Any) -> bool:
        """Check whether a discriminant has a registered product."""
        return self.constructor_for(discriminant) is not None

    def discriminants(self) -> List[Enum]:
        """List supported discriminants in declaration order."""
        return [member for member in self.discriminant_type if member in self._entries]

    def __contains__(self, discriminant: Any) -> bool:
        return self.supports(discriminant)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        names = ', '.join(member.name for member in self.discriminants())
        return f"ConstructionRegistry({self.name}: {names})"


def normalize_name(value: str) -> str:
    """Lowercase a discriminant name, treating ``-`` as ``_``."""
    return value.strip().lower().replace('-', '_')


def parse_discriminant(discriminant_type: Type[E], value: Any) -> E:
    """
    Convert a member or member name to a discriminant.

    Names are matched case-insensitively, with ``-`` treated as ``_``.
    """
    if isinstance(value, discriminant_type):
        return value

    if isinstance(value, str):
        key = normalize_name(value).upper()
        members: Dict[str, E] = discriminant_type.__members__
        if key in members:
            return members[key]

    raise UnsupportedDiscriminant(
        value,
        message=f"{value!r} is not a {discriminant_type.__name__}",
        details={'allowed': [member.name for member in discriminant_type]}
    )
