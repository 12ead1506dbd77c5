"""
Sequence generators for identifiers the persistence provider does not assign.
"""

from typing import Optional, Type

from orm_idgen.cache import GeneratorCache
from orm_idgen.core.exceptions import GeneratorInstantiationException
from orm_idgen.core.interfaces import IGenerator, IGeneratorResolver
from orm_idgen.core.registry import DEFAULT_ID_GENERATORS, IdGeneratorRegistry
from orm_idgen.metamodel.attributes import SingularAttribute
from orm_idgen.spi.generators import Generators
from orm_idgen.spi.node import Node
from shared.utils.logger import log_error, setup_logger

logger = setup_logger(__name__)


class IdSequenceResolver(IGeneratorResolver):
    """
    Hands out one sequence generator per node for non-generated ids.

    Ids assigned by the database (autoincrement, identity, sequence,
    defaults) get no opinion; so do id types without a registered
    generator.
    """

    def __init__(self, registry: IdGeneratorRegistry = DEFAULT_ID_GENERATORS):
        self.registry = registry

    def try_resolve(
        self,
        node: Node,
        generators: Generators,
        attribute: Optional[SingularAttribute],
        cache: GeneratorCache,
    ) -> Optional[IGenerator]:
        if attribute is None or not attribute.is_id or attribute.is_generated:
            return None

        generator_class = self.registry.get(attribute.type_class)
        if generator_class is None:
            return None

        return cache.get_or_create(node, lambda: _instantiate(generator_class))


def _instantiate(generator_class: Type[IGenerator]) -> IGenerator:
    try:
        return generator_class()
    except Exception as e:
        log_error(logger, e, f"Cannot instantiate id generator {generator_class.__name__}")
        raise GeneratorInstantiationException(
            f"Failed to instantiate {generator_class.__module__}.{generator_class.__qualname__}"
        ) from e
