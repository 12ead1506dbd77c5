"""
Value generators handed out by the provider.
"""

from orm_idgen.generators.sequence import (
    SequenceGenerator,
    LongSequenceGenerator,
    IntegerSequenceGenerator,
)
from orm_idgen.generators.strings import StringGenerator

__all__ = [
    "SequenceGenerator",
    "LongSequenceGenerator",
    "IntegerSequenceGenerator",
    "StringGenerator",
]
