"""
Host settings handed to service providers at initialization.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Keys(str, Enum):
    """Setting keys understood by the id generation provider."""
    METAMODEL = "orm_idgen.metamodel"
    GENERATOR_PROVIDER_EXCLUSIONS = "orm_idgen.generator_provider.exclusions"


class Settings:
    """
    Key/value settings of one generation session.

    Example:
        >>> settings = Settings().set(Keys.METAMODEL, Base)
        >>> settings.get(Keys.METAMODEL) is Base
        True
    """

    def __init__(self, values: Optional[Dict[Keys, Any]] = None):
        self._values: Dict[Keys, Any] = dict(values or {})

    def set(self, key: Keys, value: Any) -> "Settings":
        self._values[Keys(key)] = value
        return self

    def get(self, key: Keys, default: Any = None) -> Any:
        return self._values.get(Keys(key), default)

    def __contains__(self, key: object) -> bool:
        try:
            return Keys(key) in self._values
        except ValueError:
            return False

    def __repr__(self) -> str:
        return f"<Settings({', '.join(k.name for k in self._values)})>"


@dataclass
class ServiceProviderContext:
    """What a host passes to IServiceProvider.init()."""
    settings: Settings = field(default_factory=Settings)
