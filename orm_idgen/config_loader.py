"""
Provider settings loader.

Loads host settings for the id generation provider from a YAML file:

    exclusions:
      - shop.models.AuditLog
      - shop.models.Order#reference

`exclusions` may also be a single comma-separated string.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from orm_idgen.core.exceptions import ConfigurationException
from orm_idgen.spi.settings import Keys, Settings
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load the raw YAML mapping.

    Raises:
        ConfigurationException: If the file is missing or not a YAML mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationException(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationException(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationException(
            f"Expected a mapping in {config_path}, got {type(config).__name__}"
        )

    logger.info(f"Loaded provider config from {config_path}")
    return config


def exclusions_to_string(value: Any) -> Optional[str]:
    """Normalize the `exclusions` entry to the comma-separated setting format."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(str(token).strip() for token in value)
    raise ConfigurationException(
        f"'exclusions' must be a list or a string, got {type(value).__name__}"
    )


def load_provider_settings(
    config_path: Union[str, Path],
    metamodel: Any = None,
    settings: Optional[Settings] = None,
) -> Settings:
    """
    Build provider settings from a YAML file.

    Args:
        config_path: YAML file path
        metamodel: Metamodel (registry, declarative base or metamodel object)
        settings: Existing settings to extend; a new instance otherwise

    Returns:
        Settings with METAMODEL and GENERATOR_PROVIDER_EXCLUSIONS filled in
    """
    config = load_config(config_path)
    settings = settings if settings is not None else Settings()

    if metamodel is not None:
        settings.set(Keys.METAMODEL, metamodel)

    exclusions = exclusions_to_string(config.get("exclusions"))
    if exclusions is not None:
        settings.set(Keys.GENERATOR_PROVIDER_EXCLUSIONS, exclusions)

    return settings
