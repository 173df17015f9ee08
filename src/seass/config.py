"""Configuration management for the SeaSS linter."""

import os
import tomllib
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List
from pydantic import BaseModel, Field, ValidationError

from .utils.errors import ConfigurationError


PROJECT_CONFIG_FILES = ("seass.yaml", "seass.yml", "seass.toml")


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "WARNING"
    format: str = "text"
    file: Optional[str] = None


class SeassConfig(BaseModel):
    """Main configuration class for the SeaSS linter."""

    ignore: List[str] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    current_dir = Path.cwd()
    for name in PROJECT_CONFIG_FILES:
        config_file = current_dir / name
        if config_file.exists():
            return config_file

    return current_dir / PROJECT_CONFIG_FILES[0]


def find_project_config(root: Path) -> Optional[Path]:
    """Return the first SeaSS configuration file present in ``root``."""
    for name in PROJECT_CONFIG_FILES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def _read_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML or TOML configuration file into a dictionary.

    Top-level keys are lower-cased so ``Ignore`` and ``ignore`` are the same.
    """
    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                raw = tomllib.load(f)
        else:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"failed to read {path.name} file: {e}", details={"path": str(path)}
        )
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f"failed to parse {path.name} file: {e}", details={"path": str(path)}
        )

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"failed to parse {path.name} file: expected a mapping at the top level",
            details={"path": str(path)},
        )
    return {str(key).lower(): value for key, value in raw.items()}


def _build_config(config_dict: Dict[str, Any]) -> SeassConfig:
    try:
        return SeassConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def load_config(config_path: Optional[str] = None) -> SeassConfig:
    """Load configuration from file or environment variables.

    A missing file yields the default configuration.
    """
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    config_dict: Dict[str, Any] = {}

    if path.exists():
        config_dict.update(_read_config_file(path))

    _deep_update(config_dict, _get_env_overrides())

    return _build_config(config_dict)


def load_project_config(root: Path) -> SeassConfig:
    """Load the configuration that must live in a linted project root.

    Args:
        root: Directory being linted

    Returns:
        SeassConfig with the project's ignore list

    Raises:
        ConfigurationError: If no configuration file exists or it cannot be parsed
    """
    path = find_project_config(root)
    if path is None:
        raise ConfigurationError(
            f"failed to read seass config file: none of {', '.join(PROJECT_CONFIG_FILES)} "
            f"found in {root}",
            details={"root": str(root)},
        )

    config_dict = _read_config_file(path)
    _deep_update(config_dict, _get_env_overrides())
    return _build_config(config_dict)


def _get_env_overrides() -> Dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: Dict[str, Any] = {}

    if os.getenv("SEASS_IGNORE"):
        overrides["ignore"] = [
            entry.strip() for entry in os.getenv("SEASS_IGNORE", "").split(",") if entry.strip()
        ]

    # Logging configuration
    if os.getenv("LOG_LEVEL"):
        overrides.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    if os.getenv("LOG_FORMAT"):
        overrides.setdefault("logging", {})["format"] = os.getenv("LOG_FORMAT")

    if os.getenv("LOG_FILE"):
        overrides.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

    return overrides


def _deep_update(base_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> None:
    """Deep update a dictionary with another dictionary."""
    for key, value in update_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_update(base_dict[key], value)
        else:
            base_dict[key] = value