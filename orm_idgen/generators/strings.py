"""
Random string generator bounded by column length.
"""

import string
from random import Random
from typing import Optional, Set

from orm_idgen.core.exceptions import GeneratorExhaustedException
from orm_idgen.core.interfaces import IGenerator
from shared.utils.config import settings


class StringGenerator(IGenerator):
    """
    Random uppercase strings with a length between min_length and max_length.

    Configured fluently, the way hosts hand out generator specs:

        >>> gen = StringGenerator().max_length(2).unique()
        >>> gen.generate(Random(1))  # doctest: +SKIP
        'QK'
    """

    ALPHABET = string.ascii_uppercase

    # Collisions tolerated in unique mode before giving up
    MAX_UNIQUE_ATTEMPTS = 1000

    def __init__(self, min_length: Optional[int] = None, max_length: Optional[int] = None):
        self._min_length = settings.STRING_MIN_LENGTH if min_length is None else min_length
        self._max_length = settings.STRING_MAX_LENGTH if max_length is None else max_length
        # An explicit bound wins over the configured default on the other side
        if min_length is None:
            self._min_length = min(self._min_length, self._max_length)
        if max_length is None:
            self._max_length = max(self._max_length, self._min_length)
        self._unique = False
        self._seen: Set[str] = set()
        self._validate()

    def min_length(self, length: int) -> "StringGenerator":
        self._min_length = length
        self._max_length = max(self._max_length, length)
        self._validate()
        return self

    def max_length(self, length: int) -> "StringGenerator":
        self._max_length = length
        self._min_length = min(self._min_length, length)
        self._validate()
        return self

    def unique(self) -> "StringGenerator":
        self._unique = True
        return self

    @property
    def bounds(self) -> tuple:
        return self._min_length, self._max_length

    @property
    def is_unique(self) -> bool:
        return self._unique

    def _validate(self) -> None:
        if self._min_length < 0:
            raise ValueError(f"min_length must not be negative: {self._min_length}")
        if self._max_length < self._min_length:
            raise ValueError(
                f"max_length {self._max_length} is smaller than min_length {self._min_length}"
            )

    def _random_string(self, random: Random) -> str:
        length = random.randint(self._min_length, self._max_length)
        return "".join(random.choice(self.ALPHABET) for _ in range(length))

    def generate(self, random: Random) -> str:
        if not self._unique:
            return self._random_string(random)

        for _ in range(self.MAX_UNIQUE_ATTEMPTS):
            value = self._random_string(random)
            if value not in self._seen:
                self._seen.add(value)
                return value

        raise GeneratorExhaustedException(
            f"No unused string of length {self._min_length}..{self._max_length} "
            f"found after {self.MAX_UNIQUE_ATTEMPTS} attempts ({len(self._seen)} already produced)"
        )

    def __repr__(self) -> str:
        return (
            f"<StringGenerator(min={self._min_length}, max={self._max_length}, "
            f"unique={self._unique})>"
        )
