"""
Tests for the id sequence and string resolvers.
"""

import pytest
from sqlalchemy import BigInteger, Enum, Integer, Numeric, String, Unicode, Uuid

from orm_idgen.core.exceptions import GeneratorInstantiationException
from orm_idgen.core.interfaces import IGenerator
from orm_idgen.core.registry import DEFAULT_ID_GENERATORS
from orm_idgen.generators import IntegerSequenceGenerator, LongSequenceGenerator, StringGenerator
from orm_idgen.metamodel import SingularAttribute
from orm_idgen.resolvers import IdSequenceResolver, StringResolver
from tests.models import Country, Invoice


def _id(type_class, python_type=int, generated=False, max_length=None):
    return SingularAttribute(
        name="id",
        declaring_class=Invoice,
        python_type=python_type,
        type_class=type_class,
        is_id=True,
        is_generated=generated,
        max_length=max_length,
        nullable=False,
    )


class BrokenGenerator(IGenerator):
    def __init__(self):
        raise RuntimeError("boom")

    def generate(self, random):
        return None


class NeedsArgumentGenerator(IGenerator):
    def __init__(self, start):
        self.start = start

    def generate(self, random):
        return self.start


# ==============================================================================
# ID SEQUENCE RESOLVER
# ==============================================================================

@pytest.mark.parametrize("type_class, expected", [
    (BigInteger, LongSequenceGenerator),
    (Integer, IntegerSequenceGenerator),
])
def test_registered_id_types_get_sequences(make_node, generators, cache, type_class, expected):
    resolver = IdSequenceResolver()

    generator = resolver.try_resolve(make_node(Invoice, "id"), generators, _id(type_class), cache)

    assert isinstance(generator, expected)


def test_generated_id_gets_no_sequence(make_node, generators, cache):
    resolver = IdSequenceResolver()

    assert resolver.try_resolve(make_node(Invoice, "id"), generators, _id(BigInteger, generated=True), cache) is None
    assert len(cache) == 0


def test_unregistered_id_type_gets_no_sequence(make_node, generators, cache):
    resolver = IdSequenceResolver()

    assert resolver.try_resolve(make_node(Invoice, "id"), generators, _id(Numeric), cache) is None


def test_non_id_and_missing_attribute(make_node, generators, cache):
    resolver = IdSequenceResolver()
    node = make_node(Invoice, "total")
    total = SingularAttribute(name="total", declaring_class=Invoice, python_type=int, type_class=Integer)

    assert resolver.try_resolve(node, generators, total, cache) is None
    assert resolver.try_resolve(node, generators, None, cache) is None


def test_same_node_reuses_generator(make_node, generators, cache):
    resolver = IdSequenceResolver()
    node = make_node(Invoice, "id")

    first = resolver.try_resolve(node, generators, _id(BigInteger), cache)
    second = resolver.try_resolve(node, generators, _id(BigInteger), cache)

    assert first is second
    assert cache.get(node) is first
    assert node in cache
    assert len(cache) == 1


def test_custom_registry(make_node, generators, cache):
    resolver = IdSequenceResolver(DEFAULT_ID_GENERATORS.with_generator(Numeric, LongSequenceGenerator))

    generator = resolver.try_resolve(make_node(Invoice, "id"), generators, _id(Numeric), cache)

    assert isinstance(generator, LongSequenceGenerator)


@pytest.mark.parametrize("generator_class", [BrokenGenerator, NeedsArgumentGenerator])
def test_construction_failure_is_fatal(make_node, generators, cache, generator_class):
    resolver = IdSequenceResolver(DEFAULT_ID_GENERATORS.with_generator(Numeric, generator_class))
    node = make_node(Invoice, "id")

    with pytest.raises(GeneratorInstantiationException) as excinfo:
        resolver.try_resolve(node, generators, _id(Numeric), cache)

    assert excinfo.value.__cause__ is not None
    assert node not in cache
    assert len(cache) == 0


# ==============================================================================
# STRING RESOLVER
# ==============================================================================

def test_string_id_gets_unique_generator_within_length(make_node, generators, cache):
    resolver = StringResolver()
    code = _id(String, python_type=str, max_length=2)

    generator = resolver.try_resolve(make_node(Country, "code"), generators, code, cache)

    assert isinstance(generator, StringGenerator)
    assert generator.is_unique
    assert generator.bounds == (2, 2)


def test_string_id_without_length_uses_defaults(make_node, generators, cache):
    resolver = StringResolver()

    generator = resolver.try_resolve(make_node(Country, "code"), generators, _id(String, python_type=str), cache)

    assert generator.is_unique
    assert generator.bounds == (3, 10)


def test_generated_string_id_gets_no_opinion(make_node, generators, cache):
    resolver = StringResolver()
    token = _id(String, python_type=str, generated=True, max_length=36)

    assert resolver.try_resolve(make_node(Country, "code"), generators, token, cache) is None


def test_string_column_bounded_by_length(make_node, generators, cache):
    resolver = StringResolver()
    name = SingularAttribute(name="name", declaring_class=Country, python_type=str, type_class=String, max_length=60)

    generator = resolver.try_resolve(make_node(Country, "name"), generators, name, cache)

    assert not generator.is_unique
    assert generator.bounds == (3, 60)


def test_string_column_without_length_gets_no_opinion(make_node, generators, cache):
    resolver = StringResolver()
    notes = SingularAttribute(name="notes", declaring_class=Country, python_type=str, type_class=String)

    assert resolver.try_resolve(make_node(Country, "notes"), generators, notes, cache) is None


def test_non_string_attribute_gets_no_opinion(make_node, generators, cache):
    resolver = StringResolver()

    assert resolver.try_resolve(make_node(Invoice, "id"), generators, _id(BigInteger), cache) is None
    assert resolver.try_resolve(make_node(Invoice, "id"), generators, None, cache) is None


@pytest.mark.parametrize("type_class", [Enum, Uuid])
def test_str_valued_non_text_types_get_no_opinion(make_node, generators, cache, type_class):
    resolver = StringResolver()
    column = _id(type_class, python_type=str, max_length=36)

    assert resolver.try_resolve(make_node(Country, "code"), generators, column, cache) is None
    assert len(cache) == 0


def test_string_subclass_is_free_text(make_node, generators, cache):
    resolver = StringResolver()
    title = SingularAttribute(name="name", declaring_class=Country, python_type=str, type_class=Unicode, max_length=20)

    assert resolver.try_resolve(make_node(Country, "name"), generators, title, cache).bounds == (3, 20)
