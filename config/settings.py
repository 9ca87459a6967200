"""
Configuration management for vectordist.

Provides a settings dataclass and utilities for loading it
from YAML files.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import List, Optional
import yaml

from vectordist.core.exceptions import ConfigurationError
from vectordist.utils.logging import LEVELS


@dataclass
class Settings:
    """
    Main settings container for vectordist.

    Attributes:
        metric: Distance metric name or alias (euclidean, cosine,
            manhattan, rmse)
        weights: Optional per-dimension weights
        log_level: Logging level
    """
    metric: str = "euclidean"
    weights: Optional[List[float]] = None
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown settings: {unknown}")

        weights = data.get("weights")
        if weights is not None:
            if not isinstance(weights, list):
                raise ConfigurationError(
                    f"weights must be a list, got {type(weights).__name__}"
                )
            try:
                data = {**data, "weights": [float(w) for w in weights]}
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"weights must be numeric: {e}") from e

        log_level = data.get("log_level", cls.log_level)
        if not isinstance(log_level, str) or log_level.upper() not in LEVELS:
            raise ConfigurationError(
                f"Invalid log_level {log_level!r}. Valid options: {list(LEVELS)}"
            )

        return cls(**data)

    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        from dataclasses import asdict
        return asdict(self)


def get_default_config_path() -> Path:
    """Get path to default configuration file."""
    # Check environment variable
    env_config = os.environ.get("VECTORDIST_CONFIG")
    if env_config:
        return Path(env_config)

    # Check for config in current directory
    local_config = Path("./config/default_config.yaml")
    if local_config.exists():
        return local_config

    return Path(__file__).parent / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Settings object with loaded configuration

    Raises:
        ConfigurationError: If the file is not a mapping or has unknown keys

    Example:
        >>> settings = load_config()
        >>> settings = load_config("./my_config.yaml")
    """
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    if not path.exists():
        # Return default settings if no config file
        return Settings()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )

    return Settings.from_dict(data)
