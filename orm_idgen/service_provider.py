"""
Service provider that configures generators for ORM identifier attributes.

A host test-data engine loads the provider, calls init() once with its
settings and then asks the lookup function returned by
get_generator_provider() for a generator at every node it visits.
"""

from typing import List, Optional, Sequence

from orm_idgen.cache import GeneratorCache
from orm_idgen.core.exceptions import NotAnEntityError
from orm_idgen.core.interfaces import GeneratorProvider, IGenerator, IGeneratorResolver, IServiceProvider
from orm_idgen.exclusions import ExclusionMatcher
from orm_idgen.metamodel.attributes import IAttributeCatalog
from orm_idgen.metamodel.sqlalchemy_metamodel import SqlAlchemyMetamodel
from orm_idgen.resolvers import IdSequenceResolver, StringResolver
from orm_idgen.spi.generators import Generators
from orm_idgen.spi.node import Node
from orm_idgen.spi.settings import Keys, ServiceProviderContext
from shared.utils.config import settings as env_settings
from shared.utils.logger import log_function_call, log_trace, setup_logger

logger = setup_logger(__name__)


def default_resolvers() -> List[IGeneratorResolver]:
    # Order matters
    return [
        IdSequenceResolver(),
        StringResolver(),
    ]


class IdGeneratorServiceProvider(IServiceProvider):
    """
    Auto configures id generators for ORM id attributes that are not
    generated by the persistence provider.

    Example:
        >>> provider = IdGeneratorServiceProvider()
        >>> provider.init(ServiceProviderContext(Settings().set(Keys.METAMODEL, Base)))
        >>> lookup = provider.get_generator_provider()
        >>> lookup(node, Generators())  # doctest: +SKIP
        <LongSequenceGenerator(next=1)>
    """

    def __init__(self, resolvers: Optional[Sequence[IGeneratorResolver]] = None):
        self.resolvers: List[IGeneratorResolver] = list(resolvers) if resolvers is not None else default_resolvers()
        self.metamodel: Optional[IAttributeCatalog] = None
        self.exclusions = ExclusionMatcher()

    def init(self, context: ServiceProviderContext) -> None:
        metamodel = context.settings.get(Keys.METAMODEL)
        raw_exclusions = context.settings.get(Keys.GENERATOR_PROVIDER_EXCLUSIONS)
        if raw_exclusions is None:
            raw_exclusions = env_settings.GENERATOR_PROVIDER_EXCLUSIONS

        log_function_call(logger, "init", metamodel=metamodel, exclusions=raw_exclusions)

        self.metamodel = _as_catalog(metamodel)
        self.exclusions = ExclusionMatcher.from_string(raw_exclusions)
        if self.exclusions:
            logger.info(f"Loaded {len(self.exclusions)} generator provider exclusion(s)")

    def get_generator_provider(self) -> GeneratorProvider:
        cache = GeneratorCache()

        def provide(node: Node, generators: Generators) -> Optional[IGenerator]:
            return self._resolve(node, generators, cache)

        return provide

    def _resolve(self, node: Node, generators: Generators, cache: GeneratorCache) -> Optional[IGenerator]:
        field = node.field
        if field is None or self.metamodel is None or self.exclusions.is_excluded(field):
            return None

        cached = cache.get(node)
        if cached is not None:
            return cached

        try:
            # Ideally this would be the target class of the node's parent, which
            # the host does not expose. Ids declared on an unmapped mixin are
            # therefore not resolved.
            entity_type = self.metamodel.entity(field.declaring_class)
        except NotAnEntityError as e:
            log_trace(logger, f"{field.declaring_class_name} is not a managed entity", e)
            return None

        attribute = entity_type.attribute(field.name)
        for resolver in self.resolvers:
            generator = resolver.try_resolve(node, generators, attribute, cache)
            if generator is not None:
                logger.debug(f"{type(resolver).__name__} resolved {generator!r} for {field}")
                return generator
        return None


def _as_catalog(metamodel) -> Optional[IAttributeCatalog]:
    if metamodel is None or isinstance(metamodel, IAttributeCatalog):
        return metamodel
    return SqlAlchemyMetamodel.of(metamodel)
