"""
Per-session generator cache.
"""

from typing import Callable, Dict, Optional

from orm_idgen.core.interfaces import IGenerator
from orm_idgen.spi.node import Node


class GeneratorCache:
    """
    Generators already handed out in one generation session, keyed by node.

    Nodes hash by identity, so each node keeps its own generator (and its
    own sequence state). Entries live as long as the cache; nothing is
    evicted. Not thread-safe: one session is driven by one thread.
    """

    def __init__(self):
        self._generators: Dict[Node, IGenerator] = {}

    def get(self, node: Node) -> Optional[IGenerator]:
        return self._generators.get(node)

    def get_or_create(self, node: Node, factory: Callable[[], IGenerator]) -> IGenerator:
        """
        Return the node's generator, creating and storing it on first use.

        Args:
            node: Cache key
            factory: Called at most once per node
        """
        generator = self._generators.get(node)
        if generator is None:
            generator = factory()
            self._generators[node] = generator
        return generator

    def __contains__(self, node: object) -> bool:
        return node in self._generators

    def __len__(self) -> int:
        return len(self._generators)
