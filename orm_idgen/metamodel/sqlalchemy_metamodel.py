"""
SQLAlchemy implementation of the metamodel.

Reads mapper metadata only; no engine or session is ever needed.
"""

from inspect import signature
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, inspect
from sqlalchemy.orm import ColumnProperty, Mapper, registry as Registry

from orm_idgen.core.exceptions import ConfigurationException, NotAnEntityError
from orm_idgen.metamodel.attributes import IAttributeCatalog, IEntityType, SingularAttribute
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


def is_generated_column(column: Column) -> bool:
    """
    Check whether the database or the ORM assigns this column on insert.

    True for identity columns, sequences, client-side defaults, server
    defaults and the table's autoincrement column.
    """
    if column.identity is not None:
        return True
    if column.default is not None or column.server_default is not None:
        return True
    table = column.table
    return table is not None and table.autoincrement_column is column


class SqlAlchemyEntityType(IEntityType):
    """
    Entity descriptor backed by a SQLAlchemy Mapper.

    Example:
        >>> entity = SqlAlchemyEntityType(inspect(Customer))
        >>> entity.attribute("id").is_id
        True
    """

    def __init__(self, mapper: Mapper):
        self.mapper = mapper

    @property
    def entity_class(self) -> type:
        return self.mapper.class_

    def attribute(self, name: str) -> Optional[SingularAttribute]:
        prop = self.mapper.column_attrs.get(name)
        if prop is not None:
            return self._describe(name, prop)

        # Not a direct attribute: try the identifier, which may be a
        # renamed primary key column or a component of a composite key
        return self._resolve_id_attribute(name)

    def id_attributes(self) -> List[SingularAttribute]:
        return [
            self._describe(prop.key, prop)
            for prop in self._primary_key_properties()
        ]

    def _primary_key_properties(self) -> List[ColumnProperty]:
        props: List[ColumnProperty] = []
        for column in self.mapper.primary_key:
            prop = self.mapper.get_property_by_column(column)
            if not any(p is prop for p in props):
                props.append(prop)
        return props

    def _is_id(self, prop: ColumnProperty) -> bool:
        return any(p is prop for p in self._primary_key_properties())

    def _resolve_id_attribute(self, name: str) -> Optional[SingularAttribute]:
        pk_props = self._primary_key_properties()

        for prop in pk_props:
            if any(isinstance(c, Column) and c.name == name for c in prop.columns):
                return self._describe(name, prop)

        for composite in self.mapper.composites:
            if composite.composite_class is None:
                continue
            if not all(any(p is pk for pk in pk_props) for p in composite.props):
                continue
            for component, prop in zip(_component_names(composite.composite_class), composite.props):
                if component == name:
                    return self._describe(name, prop)

        logger.debug(f"No attribute '{name}' on {self.mapper.class_.__name__}")
        return None

    def _describe(self, name: str, prop: ColumnProperty) -> Optional[SingularAttribute]:
        column = prop.columns[0]
        if not isinstance(column, Column):
            # column_property() over a SQL expression; not a stored attribute
            return None

        return SingularAttribute(
            name=name,
            declaring_class=self.mapper.class_,
            python_type=_python_type(column),
            type_class=type(column.type),
            is_id=self._is_id(prop),
            is_generated=any(
                isinstance(c, Column) and is_generated_column(c) for c in prop.columns
            ),
            max_length=getattr(column.type, "length", None),
            nullable=bool(column.nullable),
            unique=bool(column.unique),
        )

    def __repr__(self) -> str:
        return f"<SqlAlchemyEntityType({self.mapper.class_.__name__})>"


class SqlAlchemyMetamodel(IAttributeCatalog):
    """
    Metamodel over the classes mapped in one SQLAlchemy registry.

    Accepts a registry or a declarative base carrying one. Classes mapped
    in other registries are not managed by this metamodel.
    """

    def __init__(self, source: Any):
        self.registry = _as_registry(source)
        self._entities: Dict[type, SqlAlchemyEntityType] = {}

    @classmethod
    def of(cls, source: Any) -> "SqlAlchemyMetamodel":
        """Wrap a registry or declarative base; metamodels pass through."""
        if isinstance(source, SqlAlchemyMetamodel):
            return source
        return cls(source)

    def entity(self, cls: Any) -> SqlAlchemyEntityType:
        cached = self._entities.get(cls)
        if cached is not None:
            return cached

        mapper = inspect(cls, raiseerr=False) if isinstance(cls, type) else None
        if not isinstance(mapper, Mapper) or mapper.registry is not self.registry:
            raise NotAnEntityError(f"Not a managed entity type: {cls!r}")

        entity_type = SqlAlchemyEntityType(mapper)
        self._entities[cls] = entity_type
        return entity_type

    def entities(self) -> List[SqlAlchemyEntityType]:
        """All entities currently mapped in the registry."""
        return [self.entity(mapper.class_) for mapper in self.registry.mappers]

    def __repr__(self) -> str:
        return f"<SqlAlchemyMetamodel(mappers={len(self.registry.mappers)})>"


def _as_registry(source: Any) -> Registry:
    if isinstance(source, Registry):
        return source
    candidate = getattr(source, "registry", None)
    if isinstance(candidate, Registry):
        return candidate
    raise ConfigurationException(
        f"Expected a SQLAlchemy registry or declarative base, got {source!r}"
    )


def _python_type(column: Column) -> Optional[type]:
    try:
        return column.type.python_type
    except NotImplementedError:
        return None


def _component_names(composite_class: Any) -> List[str]:
    return list(signature(composite_class).parameters)
