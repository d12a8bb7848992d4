"""Top-level package for fitting price as a linear function of area."""

from .config import LoggingConfig, RegressionSettings, TrainingConfig
from .datasets import HOUSES, load_samples
from .errors import ConfigError, DatasetError, DegenerateScaleError, InvalidHyperparameterError, RegressionError
from .gradient import Gradient, gradient, sample_error
from .logging_utils import JsonFormatter, configure_logging
from .metrics import mean_squared_error
from .model import Params, Sample, predict
from .models import SampleRecord
from .pipeline import TrainedModel, fit
from .scaling import NormalizedDataset, Scale, normalize_dataset
from .training import (
    DEFAULT_EPOCHS,
    DEFAULT_LEARNING_RATE,
    GradientReducer,
    SequentialReducer,
    ThreadedReducer,
    Trainer,
    batch_gradient,
    train,
    update_params,
    validate_hyperparameters,
)

__all__ = [
    "Sample",
    "Params",
    "predict",
    "Gradient",
    "gradient",
    "sample_error",
    "Scale",
    "NormalizedDataset",
    "normalize_dataset",
    "DEFAULT_EPOCHS",
    "DEFAULT_LEARNING_RATE",
    "GradientReducer",
    "SequentialReducer",
    "ThreadedReducer",
    "Trainer",
    "batch_gradient",
    "train",
    "update_params",
    "validate_hyperparameters",
    "TrainedModel",
    "fit",
    "mean_squared_error",
    "HOUSES",
    "load_samples",
    "SampleRecord",
    "LoggingConfig",
    "TrainingConfig",
    "RegressionSettings",
    "JsonFormatter",
    "configure_logging",
    "RegressionError",
    "ConfigError",
    "DegenerateScaleError",
    "InvalidHyperparameterError",
    "DatasetError",
]
