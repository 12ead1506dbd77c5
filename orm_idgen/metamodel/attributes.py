"""
Metamodel interfaces.

The provider only needs two questions answered: is a class a managed
entity, and what does the metamodel know about one of its attributes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional

from orm_idgen.core.exceptions import NotAnEntityError


@dataclass(frozen=True)
class SingularAttribute:
    """
    Read-only description of a single-valued mapped attribute.

    Attributes:
        name: Attribute name on the entity
        declaring_class: Entity class owning the attribute
        python_type: Python type of the values (int, str, ...), None if unknown
        type_class: Class of the column type (e.g. sqlalchemy.BigInteger)
        is_id: Part of the entity's identifier
        is_generated: Value assigned by the persistence provider on insert
        max_length: Declared maximum length for string columns
        nullable: Column accepts NULL
        unique: Column carries a unique constraint
    """
    name: str
    declaring_class: type
    python_type: Optional[type] = None
    type_class: Optional[type] = None
    is_id: bool = False
    is_generated: bool = False
    max_length: Optional[int] = None
    nullable: bool = True
    unique: bool = False


class IEntityType(ABC):
    """Descriptor of one managed entity."""

    @property
    @abstractmethod
    def entity_class(self) -> type:
        pass

    @abstractmethod
    def attribute(self, name: str) -> Optional[SingularAttribute]:
        """
        Find a singular attribute by name.

        Returns:
            Attribute, or None when the entity has no such singular attribute
        """
        pass

    @abstractmethod
    def id_attributes(self) -> List[SingularAttribute]:
        """All identifier attributes of the entity."""
        pass


class IAttributeCatalog(ABC):
    """Entry point of a metamodel: entity lookup by class."""

    @abstractmethod
    def entity(self, cls: Any) -> IEntityType:
        """
        Get the entity descriptor of a class.

        Raises:
            NotAnEntityError: If the class is not a managed entity
        """
        pass

    def is_entity(self, cls: Any) -> bool:
        try:
            self.entity(cls)
        except NotAnEntityError:
            return False
        return True
