"""
Generators a host makes available to service providers.
"""

from typing import Optional

from orm_idgen.generators import (
    IntegerSequenceGenerator,
    LongSequenceGenerator,
    StringGenerator,
)


class Generators:
    """
    Factory facade over the built-in generators.

    Each call returns a fresh generator; callers keep the instance when they
    need its state to carry over between values.
    """

    def string(self, min_length: Optional[int] = None, max_length: Optional[int] = None) -> StringGenerator:
        return StringGenerator(min_length=min_length, max_length=max_length)

    def long_seq(self, start: int = 1) -> LongSequenceGenerator:
        return LongSequenceGenerator(start)

    def int_seq(self, start: int = 1) -> IntegerSequenceGenerator:
        return IntegerSequenceGenerator(start)
