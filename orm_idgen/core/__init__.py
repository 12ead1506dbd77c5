"""
Core components of the id generation provider.
"""

from orm_idgen.core.interfaces import (
    IGenerator,
    IGeneratorResolver,
    IServiceProvider,
    GeneratorProvider,
)

from orm_idgen.core.exceptions import (
    IdGenerationException,
    ConfigurationException,
    GeneratorInstantiationException,
    GeneratorExhaustedException,
    NotAnEntityError,
)

from orm_idgen.core.registry import (
    IdGeneratorRegistry,
    DEFAULT_ID_GENERATORS,
)

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
]
