"""
String generators bounded by the declared column length.
"""

from typing import Optional

from sqlalchemy import Enum, String

from orm_idgen.cache import GeneratorCache
from orm_idgen.core.interfaces import IGenerator, IGeneratorResolver
from orm_idgen.metamodel.attributes import SingularAttribute
from orm_idgen.spi.generators import Generators
from orm_idgen.spi.node import Node
from shared.utils.config import settings


class StringResolver(IGeneratorResolver):
    """
    Picks a string generator for free-text string columns.

    - Non-generated string ids get a unique generator within the column length
    - Other string columns with a declared length get a generator that
      never exceeds it
    - Enum columns, UUID columns and other non-String types get no opinion,
      so the host defaults keep their format
    - Anything else gets no opinion
    """

    def try_resolve(
        self,
        node: Node,
        generators: Generators,
        attribute: Optional[SingularAttribute],
        cache: GeneratorCache,
    ) -> Optional[IGenerator]:
        if attribute is None or not _is_free_text(attribute):
            return None

        if attribute.is_id:
            if attribute.is_generated:
                return None
            return cache.get_or_create(node, lambda: self._string(generators, attribute).unique())

        if attribute.max_length is None:
            return None

        return cache.get_or_create(node, lambda: self._string(generators, attribute))

    @staticmethod
    def _string(generators: Generators, attribute: SingularAttribute):
        if attribute.max_length is None:
            # Unsized string ids still need values; fall back to the default bounds
            return generators.string()
        # Short columns also lower the minimum length
        return generators.string(
            min_length=min(settings.STRING_MIN_LENGTH, attribute.max_length),
            max_length=attribute.max_length,
        )


def _is_free_text(attribute: SingularAttribute) -> bool:
    type_class = attribute.type_class
    if type_class is None or not isinstance(type_class, type):
        return False
    # Enum subclasses String but only accepts its members
    return issubclass(type_class, String) and not issubclass(type_class, Enum)
