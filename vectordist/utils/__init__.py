"""
Utility functions for vectordist.
"""

from .validation import validate_weights, validate_metric_name
from .logging import setup_logger, get_logger, set_level

__all__ = [
    "validate_weights",
    "validate_metric_name",
    "setup_logger",
    "get_logger",
    "set_level",
]
