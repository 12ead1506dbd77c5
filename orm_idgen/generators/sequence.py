"""
Monotonic sequence generators for integer identifiers.
"""

from random import Random
from typing import Optional

from orm_idgen.core.interfaces import IGenerator


class SequenceGenerator(IGenerator):
    """
    Counter producing start, start + 1, start + 2, ...

    The random source is ignored; sequences are deterministic so that
    identifiers stay unique within one generation session.
    """

    # Largest value the sequence may produce, None for unbounded
    MAX_VALUE: Optional[int] = None

    def __init__(self, start: int = 1):
        self._next = start

    def generate(self, random: Random) -> int:
        value = self._next
        if self.MAX_VALUE is not None and value > self.MAX_VALUE:
            raise OverflowError(
                f"{type(self).__name__} exhausted: {value} exceeds {self.MAX_VALUE}"
            )
        self._next += 1
        return value

    @property
    def next_value(self) -> int:
        """Value the next generate() call will return."""
        return self._next

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(next={self._next})>"


class LongSequenceGenerator(SequenceGenerator):
    """Sequence for 64-bit identifier columns (BigInteger)."""
    MAX_VALUE = 2 ** 63 - 1


class IntegerSequenceGenerator(SequenceGenerator):
    """Sequence for 32-bit identifier columns (Integer, SmallInteger)."""
    MAX_VALUE = 2 ** 31 - 1
