"""YAML configuration for the scanner."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigurationError
from .filtering.state import FilterState
from .utils.lexicon import Lexicon, default_lexicon

DEFAULT_CONFIG_PATH = "config/config.yaml"


def load_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file; a missing file means no overrides."""
    config_file = Path(config_path)
    if not config_file.exists():
        return {}
    try:
        with open(config_file) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {config_file}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_file} must contain a mapping at the top level")
    return data


def filters_from_config(config: Dict[str, Any]) -> FilterState:
    section = config.get('filters') or {}
    if not isinstance(section, dict):
        raise ConfigurationError("'filters' must be a mapping of filter settings")
    return FilterState.from_dict(section)


def lexicon_from_config(config: Dict[str, Any]) -> Lexicon:
    wordlist = config.get('wordlist')
    if wordlist:
        return Lexicon.from_file(wordlist)
    return default_lexicon()


def log_level_from_config(config: Dict[str, Any], default: int = logging.WARNING) -> int:
    level: Optional[Any] = config.get('log_level')
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level {level!r}")
    return resolved
