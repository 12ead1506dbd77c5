"""
orm-idgen

Generator provider for test-data engines that picks value generators for
SQLAlchemy identifier columns the database does not assign itself.
"""

__version__ = "1.0.0"

from orm_idgen.core import (
    IGenerator,
    IGeneratorResolver,
    IServiceProvider,
    GeneratorProvider,
    IdGenerationException,
    ConfigurationException,
    GeneratorInstantiationException,
    GeneratorExhaustedException,
    NotAnEntityError,
    IdGeneratorRegistry,
    DEFAULT_ID_GENERATORS,
)

from orm_idgen.spi import (
    FieldRef,
    Node,
    Keys,
    Settings,
    ServiceProviderContext,
    Generators,
)

from orm_idgen.metamodel import (
    IAttributeCatalog,
    SingularAttribute,
    SqlAlchemyMetamodel,
)

from orm_idgen.cache import GeneratorCache
from orm_idgen.exclusions import ExclusionMatcher, ExclusionRule, parse_exclusions
from orm_idgen.resolvers import IdSequenceResolver, StringResolver
from orm_idgen.selectors import GeneratedIdSelector
from orm_idgen.service_provider import IdGeneratorServiceProvider
from orm_idgen.config_loader import load_provider_settings

__all__ = [
    # Interfaces
    "IGenerator",
    "IGeneratorResolver",
    "IServiceProvider",
    "GeneratorProvider",
    # Exceptions
    "IdGenerationException",
    "ConfigurationException",
    "GeneratorInstantiationException",
    "GeneratorExhaustedException",
    "NotAnEntityError",
    # Registry
    "IdGeneratorRegistry",
    "DEFAULT_ID_GENERATORS",
    # Host contracts
    "FieldRef",
    "Node",
    "Keys",
    "Settings",
    "ServiceProviderContext",
    "Generators",
    # Metamodel
    "IAttributeCatalog",
    "SingularAttribute",
    "SqlAlchemyMetamodel",
    # Provider
    "GeneratorCache",
    "ExclusionMatcher",
    "ExclusionRule",
    "parse_exclusions",
    "IdSequenceResolver",
    "StringResolver",
    "GeneratedIdSelector",
    "IdGeneratorServiceProvider",
    "load_provider_settings",
]
