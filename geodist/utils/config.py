"""Configuration loader.

Reads configuration files in YAML format.  The command line tool looks
for a ``log_level`` key; unknown keys are ignored.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML configuration file into a dictionary.

    Parameters
    ----------
    path : str
        Path to the YAML configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Returns an empty dict if the
        file is missing or cannot be parsed.
    """
    cfg_path = Path(path)
    if not cfg_path.is_file():
        return {}
    try:
        with open(cfg_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Cannot read config %s: %s", cfg_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config %s is not a mapping, ignored", cfg_path)
        return {}
    return data


@dataclass
class GeoConfig:
    """Runtime settings of the command line tool."""

    log_level: Union[str, int] = "INFO"
    """Level name or number for the package loggers."""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeoConfig":
        level = data.get("log_level", "INFO")
        if isinstance(level, int) and not isinstance(level, bool):
            return cls(log_level=level)
        level = str(level).upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Unknown log level %r, using INFO", level)
            level = "INFO"
        return cls(log_level=level)

    @classmethod
    def load(cls, path: str) -> "GeoConfig":
        """Read settings from a YAML file, falling back to defaults."""
        return cls.from_dict(load_config(path))
