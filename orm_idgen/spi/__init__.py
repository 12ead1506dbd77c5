"""
Contracts between a test-data host engine and service providers.
"""

from orm_idgen.spi.node import FieldRef, Node, qualified_name
from orm_idgen.spi.settings import Keys, Settings, ServiceProviderContext
from orm_idgen.spi.generators import Generators

__all__ = [
    "FieldRef",
    "Node",
    "qualified_name",
    "Keys",
    "Settings",
    "ServiceProviderContext",
    "Generators",
]
