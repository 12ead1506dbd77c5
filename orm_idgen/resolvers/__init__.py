"""
Generator resolvers, tried in order.
"""

from orm_idgen.resolvers.id_resolver import IdSequenceResolver
from orm_idgen.resolvers.string_resolver import StringResolver

__all__ = [
    "IdSequenceResolver",
    "StringResolver",
]
