"""
Custom exceptions for vectordist.

Distance functions themselves never raise; they return NaN for
mismatched inputs. These exceptions cover the layers around them.
"""


class VectorDistError(Exception):
    """Base exception for vectordist."""
    pass


class ValidationError(VectorDistError):
    """Input validation error."""
    pass


class ConfigurationError(VectorDistError):
    """Invalid configuration file or settings value."""
    pass
