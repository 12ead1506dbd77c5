"""
Core interfaces for the id generation provider.

Generators, resolvers and service providers implement these interfaces.
"""

from abc import ABC, abstractmethod
from random import Random
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from orm_idgen.cache import GeneratorCache
    from orm_idgen.metamodel.attributes import SingularAttribute
    from orm_idgen.spi.generators import Generators
    from orm_idgen.spi.node import Node
    from orm_idgen.spi.settings import ServiceProviderContext


# ==============================================================================
# GENERATOR INTERFACE
# ==============================================================================

class IGenerator(ABC):
    """
    Produces values for one node of an object graph.

    Generators may be stateful (sequences keep a counter), which is why the
    provider hands out one instance per node and reuses it.
    """

    @abstractmethod
    def generate(self, random: Random) -> Any:
        """
        Produce the next value.

        Args:
            random: Random source supplied by the host engine

        Returns:
            Generated value
        """
        pass


# The lookup function a service provider hands to the host engine
GeneratorProvider = Callable[["Node", "Generators"], Optional[IGenerator]]


# ==============================================================================
# RESOLVER INTERFACE
# ==============================================================================

class IGeneratorResolver(ABC):
    """
    One link of the resolver chain.

    Resolvers are tried in a fixed order; the first one returning a
    generator wins.
    """

    @abstractmethod
    def try_resolve(
        self,
        node: "Node",
        generators: "Generators",
        attribute: Optional["SingularAttribute"],
        cache: "GeneratorCache",
    ) -> Optional[IGenerator]:
        """
        Pick a generator for the attribute behind a node.

        Args:
            node: Node being generated
            generators: Generators available from the host
            attribute: Metamodel attribute for the node's field, if any
            cache: Session cache of generators keyed by node

        Returns:
            Generator, or None when this resolver has no opinion
        """
        pass


# ==============================================================================
# SERVICE PROVIDER INTERFACE
# ==============================================================================

class IServiceProvider(ABC):
    """Extension point the host engine loads and initializes once."""

    def init(self, context: "ServiceProviderContext") -> None:
        """Receive host settings. Default implementation ignores them."""
        pass

    def get_generator_provider(self) -> Optional[GeneratorProvider]:
        """Return the per-node lookup function, or None if not supported."""
        return None
