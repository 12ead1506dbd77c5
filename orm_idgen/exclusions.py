"""
Exclusion rules for the generator provider.

Exclusions are configured as a comma-separated list of
``package.module.ClassName`` (whole class) or
``package.module.ClassName#field`` (single field) tokens.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from orm_idgen.core.exceptions import ConfigurationException
from orm_idgen.spi.node import FieldRef
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

FIELD_SEPARATOR = "#"


@dataclass(frozen=True)
class ExclusionRule:
    """A class, or one field of a class, the provider must leave alone."""
    class_name: str
    field_name: Optional[str] = None

    @classmethod
    def from_token(cls, token: str) -> "ExclusionRule":
        """
        Parse one exclusion token.

        Raises:
            ConfigurationException: If the token has more than one separator
                once trailing separators are dropped
        """
        parts = token.split(FIELD_SEPARATOR)
        # Trailing separators add no field: "Order#" is a class rule
        while len(parts) > 1 and not parts[-1]:
            parts.pop()
        if len(parts) == 1:
            return cls(parts[0])
        if len(parts) == 2:
            return cls(parts[0], parts[1])
        raise ConfigurationException(f"Cannot parse exclusion '{token}'.")

    def matches(self, field: FieldRef) -> bool:
        return (
            self.class_name == field.declaring_class_name
            and (self.field_name is None or self.field_name == field.name)
        )


def parse_exclusions(raw: Optional[str]) -> List[str]:
    """
    Split a raw exclusion setting into trimmed tokens.

    Args:
        raw: Comma-separated exclusions, or None

    Returns:
        Non-empty tokens in configuration order
    """
    if raw is None:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


class ExclusionMatcher:
    """
    Decides whether a field is excluded from generator resolution.

    Tokens are kept as configured and parsed when matching, so a malformed
    token surfaces as soon as a field is checked against it.

    Example:
        >>> matcher = ExclusionMatcher.from_string("shop.models.Order,shop.models.Item#sku")
        >>> matcher.rules
        [ExclusionRule(class_name='shop.models.Order', field_name=None), ExclusionRule(class_name='shop.models.Item', field_name='sku')]
    """

    def __init__(self, tokens: Iterable[str] = ()):
        self.tokens: List[str] = list(tokens)

    @classmethod
    def from_string(cls, raw: Optional[str]) -> "ExclusionMatcher":
        return cls(parse_exclusions(raw))

    @property
    def rules(self) -> List[ExclusionRule]:
        return [ExclusionRule.from_token(token) for token in self.tokens]

    def is_excluded(self, field: FieldRef) -> bool:
        """
        Check the field against every rule.

        Raises:
            ConfigurationException: If a token checked before a match is malformed
        """
        for token in self.tokens:
            if ExclusionRule.from_token(token).matches(field):
                logger.debug(f"Field {field} excluded by '{token}'")
                return True
        return False

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
