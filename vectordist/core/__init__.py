"""
Core definitions for vectordist.
"""

from .exceptions import (
    VectorDistError,
    ValidationError,
    ConfigurationError,
)

__all__ = [
    "VectorDistError",
    "ValidationError",
    "ConfigurationError",
]
