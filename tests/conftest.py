"""
Shared fixtures for the id generation provider tests.
"""

from random import Random
from typing import Callable

import pytest

from orm_idgen.cache import GeneratorCache
from orm_idgen.metamodel import SqlAlchemyMetamodel
from orm_idgen.service_provider import IdGeneratorServiceProvider
from orm_idgen.spi import FieldRef, Generators, Keys, Node, ServiceProviderContext, Settings
from tests.models import Base


@pytest.fixture
def metamodel() -> SqlAlchemyMetamodel:
    return SqlAlchemyMetamodel(Base)


@pytest.fixture
def generators() -> Generators:
    return Generators()


@pytest.fixture
def rnd() -> Random:
    return Random(1234)


@pytest.fixture
def cache() -> GeneratorCache:
    return GeneratorCache()


@pytest.fixture
def make_node() -> Callable[..., Node]:
    """Build a node for `cls.name`; each call is a distinct node."""
    def _make(cls: type, name: str, target_class: type = int) -> Node:
        return Node(target_class=target_class, field=FieldRef(cls, name))
    return _make


@pytest.fixture
def make_provider() -> Callable[..., IdGeneratorServiceProvider]:
    """Initialize a provider the way a host would."""
    def _make(metamodel=Base, exclusions=None, resolvers=None) -> IdGeneratorServiceProvider:
        settings = Settings()
        if metamodel is not None:
            settings.set(Keys.METAMODEL, metamodel)
        if exclusions is not None:
            settings.set(Keys.GENERATOR_PROVIDER_EXCLUSIONS, exclusions)

        provider = IdGeneratorServiceProvider(resolvers=resolvers)
        provider.init(ServiceProviderContext(settings))
        return provider
    return _make


@pytest.fixture
def lookup(make_provider):
    """Lookup function of a provider configured with the test models."""
    return make_provider().get_generator_provider()
