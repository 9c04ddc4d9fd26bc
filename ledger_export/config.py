"""Export settings loaded from a YAML configuration file.

CONFIG FILE FORMAT:
Create a ledger_export.yaml file in the working directory with:

    options:
      needs_category: true     # uncategorized transactions are errors
      needs_checkmark: true    # unchecked transactions are errors
    language: en               # en or de, used for error messages
    decimal_mark: "."          # "." or ","
    accounts:
      Checking:
        LedgerAccount: "Assets:Bank:Checking"

All keys are optional. Without a configuration file the defaults above are
used (and financial accounts are named ``Assets:<account name>``).
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple

import yaml

from ledger_export.formatting import DECIMAL_MARKS
from ledger_export.messages import LANGUAGES
from ledger_export.models import ExportOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "ledger_export.yaml"


class ConfigError(Exception):
    """Raised for unreadable or invalid configuration and input files."""


class Settings(NamedTuple):
    options: ExportOptions = ExportOptions()
    language: str = "en"
    decimal_mark: str = "."
    # account name -> account attributes (e.g. LedgerAccount)
    accounts: Mapping[str, Dict[str, str]] = MappingProxyType({})


def load_yaml(path: Path) -> dict:
    """Read a YAML mapping from a file.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load {path}: {e}")
        raise ConfigError(f"Failed to load {path}: {e}") from e

    if not isinstance(content, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return content


def _bool_option(section: dict, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"Option '{key}' must be true or false, got {value!r}")
    return value


def parse_settings(config_data: dict) -> Settings:
    """Build settings from the content of a configuration file."""
    options_section = config_data.get("options") or {}
    if not isinstance(options_section, dict):
        raise ConfigError("'options' must be a mapping")

    options = ExportOptions(
        needs_category=_bool_option(options_section, "needs_category", True),
        needs_checkmark=_bool_option(options_section, "needs_checkmark", True),
    )

    language = str(config_data.get("language", "en"))
    if language not in LANGUAGES:
        raise ConfigError(f"Unsupported language '{language}' (allowed: {', '.join(LANGUAGES)})")

    decimal_mark = str(config_data.get("decimal_mark", "."))
    if decimal_mark not in DECIMAL_MARKS:
        raise ConfigError(f"Invalid decimal mark '{decimal_mark}'")

    accounts_section = config_data.get("accounts") or {}
    if not isinstance(accounts_section, dict):
        raise ConfigError("'accounts' must be a mapping")

    accounts = {}
    for name, attributes in accounts_section.items():
        if not isinstance(attributes, dict):
            raise ConfigError(f"Attributes of account '{name}' must be a mapping")
        accounts[str(name)] = {str(k): str(v) for k, v in attributes.items()}

    return Settings(
        options=options,
        language=language,
        decimal_mark=decimal_mark,
        accounts=accounts,
    )


def load_settings(config: str | Path | None = None) -> Settings:
    """Load the export settings.

    Args:
        config: Optional config path (defaults to ledger_export.yaml in the
            working directory, which may be absent)

    Returns:
        The parsed settings

    Raises:
        ConfigError: If an explicitly given file is missing or any file is
            invalid
    """
    if config:
        config_path = Path(config)
        if not config_path.exists():
            logger.error(f"Configuration file not found: {config_path}")
            raise ConfigError(f"Configuration file not found: {config_path}")
    else:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            logger.info(f"No {DEFAULT_CONFIG_NAME} found, using default settings")
            return Settings()

    settings = parse_settings(load_yaml(config_path))
    logger.info(
        f"Loaded settings from {config_path}: {len(settings.accounts)} account overrides, "
        f"language {settings.language}"
    )
    return settings
