"""Loss metrics for evaluating fitted parameters."""

from __future__ import annotations

from typing import Iterable

from .gradient import sample_error
from .model import Params, Sample, predict


def mean_squared_error(samples: Iterable[Sample], params: Params) -> float:
    """Compute the MSE the trainer minimizes over ``samples``."""

    errors = [sample_error(predict(sample.area, params), sample.price) for sample in samples]
    if not errors:
        raise ValueError("samples must be non-empty")
    return sum(error * error for error in errors) / len(errors)
