"""Exception hierarchy for regression training and inference."""

from __future__ import annotations


class RegressionError(ValueError):
    """Base class for invalid input or configuration."""


class DegenerateScaleError(RegressionError):
    """Raised when a scale cannot be fitted (empty or zero-range values)."""


class InvalidHyperparameterError(RegressionError):
    """Raised when an epoch count, learning rate or reducer size is not positive."""


class DatasetError(RegressionError):
    """Raised when a dataset file cannot be turned into samples."""


class ConfigError(RegressionError):
    """Raised when a settings file cannot be read or parsed."""
