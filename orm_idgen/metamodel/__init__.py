"""
Persistence metamodel access.
"""

from orm_idgen.metamodel.attributes import (
    IAttributeCatalog,
    IEntityType,
    SingularAttribute,
)
from orm_idgen.metamodel.sqlalchemy_metamodel import (
    SqlAlchemyEntityType,
    SqlAlchemyMetamodel,
    is_generated_column,
)

__all__ = [
    "IAttributeCatalog",
    "IEntityType",
    "SingularAttribute",
    "SqlAlchemyEntityType",
    "SqlAlchemyMetamodel",
    "is_generated_column",
]
