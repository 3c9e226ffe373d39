"""
Configuration Loader for Jobs Service

This module loads service options from config/jobs.yml, with environment
variable overrides.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class JobsConfig:
    """Jobs service options."""

    empty_list_is_error: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "JobsConfig":
        """Create JobsConfig from dictionary."""
        listing = config_dict.get("listing") or {}
        return cls(
            empty_list_is_error=_parse_bool(listing.get("empty_list_is_error", True)),
        )

    def apply_env(self) -> None:
        """Apply JOBS_* environment overrides."""
        value = os.getenv("JOBS_EMPTY_LIST_IS_ERROR")
        if value:
            self.empty_list_is_error = _parse_bool(value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean, got {value!r}")


def load_jobs_config(config_path: Optional[str] = None) -> JobsConfig:
    """
    Load jobs configuration from YAML file.

    Args:
        config_path: Path to jobs.yml. If None, uses config/jobs.yml at the
                     project root and falls back to defaults when it is absent.

    Returns:
        JobsConfig with environment overrides applied

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If config is invalid

    Example:
        >>> config = load_jobs_config('config/jobs.yml')
        >>> config.empty_list_is_error
        True
    """
    explicit = config_path is not None
    if config_path is None:
        project_root = Path(__file__).parent.parent.parent
        config_path = str(project_root / "config" / "jobs.yml")

    logger.info("Loading jobs configuration", extra={"config_path": config_path})

    try:
        with open(config_path) as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        if explicit:
            logger.error(f"Configuration file not found: {config_path}")
            raise
        logger.warning("No configuration file found, using defaults")
        config_dict = {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML: {e}")
        raise ValueError(f"Invalid YAML in config file: {e}") from e

    if not config_dict:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

    config = JobsConfig.from_dict(config_dict)
    config.apply_env()

    logger.info(
        "Jobs configuration loaded successfully",
        extra={"empty_list_is_error": config.empty_list_is_error},
    )

    return config
