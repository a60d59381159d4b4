"""
Configuration loader for the cleaner service.

This module reads the table settings from `config/cleaner.yml`. The tables
themselves are provisioned outside this service; the config only tells the
cleaner where to read raw postings and where to write cleaned ones.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_RAW_TABLE = "ds_jobs_raw"
DEFAULT_CLEAN_TABLE = "ds_jobs_clean"

# "table" or "schema.table", plain identifiers only
_TABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


@dataclass
class CleanerConfig:
    """Tables used by the cleaner."""

    raw_table: str = DEFAULT_RAW_TABLE
    clean_table: str = DEFAULT_CLEAN_TABLE

    def validate(self) -> None:
        """Check table names and that the run does not overwrite its own input."""
        for key, value in (("raw_table", self.raw_table), ("clean_table", self.clean_table)):
            if not isinstance(value, str) or not _TABLE_NAME_PATTERN.match(value):
                raise ValueError(f"`{key}` must be a table name like 'table' or 'schema.table', got {value!r}")
        if self.raw_table == self.clean_table:
            raise ValueError("`raw_table` and `clean_table` must be different tables")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "CleanerConfig":
        """Create CleanerConfig from the `tables` section of a config mapping."""
        tables = config_dict.get("tables", {})
        if not isinstance(tables, Mapping):
            raise ValueError("`tables` section must be a mapping")
        config = cls(
            raw_table=tables.get("raw_table", DEFAULT_RAW_TABLE),
            clean_table=tables.get("clean_table", DEFAULT_CLEAN_TABLE),
        )
        config.validate()
        return config


def _project_root() -> Path:
    """Return the project root path based on this file's location."""
    return Path(__file__).resolve().parent.parent.parent


def load_cleaner_config(config_path: str | None = None) -> CleanerConfig:
    """
    Load cleaner configuration from YAML file.

    Args:
        config_path: Optional override for the config file path. When omitted,
            `config/cleaner.yml` relative to the project root is used, and
            defaults apply if that file does not exist.

    Returns:
        CleanerConfig with the raw and clean table names.

    Raises:
        FileNotFoundError: If an explicitly given config file does not exist.
        ValueError: If the YAML file cannot be parsed or has invalid values.
    """
    path = Path(config_path) if config_path else _project_root() / "config" / "cleaner.yml"
    if not path.exists():
        if config_path:
            logger.error("Cleaner configuration file not found: %s", path)
            raise FileNotFoundError(f"Cleaner configuration file not found: {path}")
        logger.warning("No cleaner configuration at %s, using defaults", path)
        return CleanerConfig()

    try:
        with path.open("r", encoding="utf-8") as handle:
            raw_config: Mapping[str, Any] | None = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse cleaner configuration: %s", exc)
        raise ValueError(f"Invalid YAML in cleaner configuration: {exc}") from exc

    if not raw_config:
        logger.warning("Cleaner configuration file is empty, using defaults: %s", path)
        return CleanerConfig()

    if not isinstance(raw_config, Mapping):
        raise ValueError("Cleaner configuration must be a mapping")

    config = CleanerConfig.from_dict(raw_config)
    logger.info(
        "Loaded cleaner configuration",
        extra={"raw_table": config.raw_table, "clean_table": config.clean_table},
    )
    return config


__all__ = ["CleanerConfig", "load_cleaner_config"]
