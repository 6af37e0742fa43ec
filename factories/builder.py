"""
Builder for assembling construction registries.
"""
from enum import Enum
from typing import Callable, Dict, Optional, Type
from utils.logging_config import get_logger
from utils.exceptions import RegistrationError
from .registry import ConstructionRegistry

logger = get_logger(__name__)


class RegistryBuilder:
    """Collects registry entries and freezes them into a registry."""

    def __init__(self, discriminant_type: Type[Enum], name: Optional[str] = None):
        self.discriminant_type = discriminant_type
        self.name = name or discriminant_type.__name__
        self.reset()
        self.logger = get_logger(self.__class__.__name__)

    def reset(self):
        """Reset the builder state."""
        self._entries: Dict[Enum, Callable] = {}
        return self

    def register(self, discriminant: Enum, constructor: Callable):
        """Add a constructor for a discriminant."""
        if not isinstance(discriminant, self.discriminant_type):
            raise RegistrationError(
                f"{discriminant!r} is not a {self.discriminant_type.__name__}",
                details={'registry': self.name}
            )
        if discriminant in self._entries:
            raise RegistrationError(
                f"{discriminant.name} is already registered in {self.name}",
                details={'registry': self.name, 'discriminant': discriminant.name}
            )

        self._entries[discriminant] = constructor
        self.logger.debug(f"Registered {discriminant.name} in {self.name}")
        return self

    def build(self, total: bool = False) -> ConstructionRegistry:
        """Build and return the registry."""
        registry = ConstructionRegistry(
            self.discriminant_type,
            self._entries,
            name=self.name,
            total=total
        )
        self.logger.debug(f"Built {self.name} registry with {len(registry)} entries")
        return registry
