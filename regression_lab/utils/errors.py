"""
Error taxonomy for the regression core.

All three derive from RegressionError (itself a ValueError) so callers that
only care about "the inputs were unusable" can catch a single type.
"""
from __future__ import annotations


class RegressionError(ValueError):
    """Base class for every failure raised by the regression core."""


class InvalidParameter(RegressionError):
    """Malformed caller input (non-positive sample count, negative noise, ...)."""


class InsufficientData(RegressionError):
    """Too few observations for the requested statistic."""


class DegenerateInput(RegressionError):
    """The statistic is mathematically undefined for this data (zero variance)."""
