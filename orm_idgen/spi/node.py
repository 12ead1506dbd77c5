"""
Object graph positions as seen by a service provider.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FieldRef:
    """A reflected field: the class declaring it and the attribute name."""
    declaring_class: type
    name: str
    type: Any = None

    @property
    def declaring_class_name(self) -> str:
        """Fully qualified name of the declaring class (module.qualname)."""
        return qualified_name(self.declaring_class)

    def __str__(self) -> str:
        return f"{self.declaring_class_name}.{self.name}"


@dataclass(frozen=True, eq=False)
class Node:
    """
    A position in the object graph being generated.

    Nodes compare and hash by identity: two nodes describing the same field
    are still different positions and get different generators.
    """
    target_class: Any
    field: Optional[FieldRef] = None

    def __repr__(self) -> str:
        return f"<Node(target={getattr(self.target_class, '__name__', self.target_class)}, field={self.field})>"


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"
