"""
Configuration module for vectordist.

Loads settings from YAML files so callers can choose the
distance metric at runtime.

Example:
    >>> from config import load_config
    >>> from vectordist import DistanceCalculator
    >>>
    >>> settings = load_config()
    >>> calc = DistanceCalculator.from_settings(settings)
"""

from .settings import (
    Settings,
    load_config,
    get_default_config_path,
)

__all__ = [
    "Settings",
    "load_config",
    "get_default_config_path",
]
