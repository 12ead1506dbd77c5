"""
Registry of identifier generators.

Maps column type classes to the generator class instantiated for
identifier columns of that type. Built once, never mutated.
"""

from types import MappingProxyType
from typing import Dict, Mapping, List, Optional, Type

from sqlalchemy import BigInteger, Integer

from orm_idgen.core.interfaces import IGenerator
from orm_idgen.generators.sequence import IntegerSequenceGenerator, LongSequenceGenerator
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


# ==============================================================================
# ID GENERATOR REGISTRY
# ==============================================================================

class IdGeneratorRegistry:
    """
    Immutable mapping from column type class to generator class.

    Lookup walks the type's MRO, so the most specific registration wins:
    BigInteger resolves before its base class Integer, and SmallInteger
    falls back to Integer.

    Example:
        registry = IdGeneratorRegistry({BigInteger: LongSequenceGenerator})
        registry.get(BigInteger)  # LongSequenceGenerator
    """

    def __init__(self, generators: Mapping[type, Type[IGenerator]]):
        self._registry: Mapping[type, Type[IGenerator]] = MappingProxyType(dict(generators))

    def with_generator(self, type_class: type, generator_class: Type[IGenerator]) -> "IdGeneratorRegistry":
        """
        Return a new registry with one more (or one replaced) registration.

        Args:
            type_class: Column type class (e.g. sqlalchemy.Numeric)
            generator_class: Generator class with a no-argument constructor
        """
        if type_class in self._registry:
            logger.warning(f"Id generator for '{type_class.__name__}' already registered, overwriting")

        generators: Dict[type, Type[IGenerator]] = dict(self._registry)
        generators[type_class] = generator_class
        logger.debug(f"Registered id generator: {type_class.__name__} -> {generator_class.__name__}")
        return IdGeneratorRegistry(generators)

    def get(self, type_class: Optional[type]) -> Optional[Type[IGenerator]]:
        """
        Get the generator class for a column type class.

        Returns:
            Generator class, or None if no registration covers the type
        """
        if type_class is None:
            return None
        for klass in type_class.__mro__:
            generator_class = self._registry.get(klass)
            if generator_class is not None:
                return generator_class
        return None

    def is_registered(self, type_class: Optional[type]) -> bool:
        """Check if a generator covers the type class"""
        return self.get(type_class) is not None

    def list_types(self) -> List[type]:
        """Get list of registered type classes"""
        return list(self._registry.keys())

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{t.__name__}->{g.__name__}" for t, g in self._registry.items())
        return f"<IdGeneratorRegistry({pairs})>"


DEFAULT_ID_GENERATORS = IdGeneratorRegistry({
    BigInteger: LongSequenceGenerator,
    Integer: IntegerSequenceGenerator,
})
