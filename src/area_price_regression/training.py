"""Full-batch gradient descent for the linear model.

Training always runs the configured number of epochs. There is no
convergence check and no guard against divergence: a learning rate that is
too large yields non-finite parameters, which are returned as-is.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from operator import add
from typing import Iterable, Protocol, Sequence

import logging
import math
import numbers

from .errors import InvalidHyperparameterError
from .gradient import Gradient, gradient, sample_error
from .model import Params, Sample, predict

DEFAULT_EPOCHS = 3000
DEFAULT_LEARNING_RATE = 0.05

logger = logging.getLogger(__name__)


class GradientReducer(Protocol):
    """Protocol for combining per-sample gradients into one batch gradient."""

    def reduce(self, contributions: Sequence[Gradient]) -> Gradient:
        """Return the sum of ``contributions``."""


class SequentialReducer:
    """Left fold over the contributions in dataset order."""

    def reduce(self, contributions: Sequence[Gradient]) -> Gradient:
        return reduce(add, contributions, Gradient.zero())


class ThreadedReducer:
    """Sum fixed contiguous chunks on a thread pool.

    Partial sums are combined in chunk order, so the result only depends on
    ``chunk_size`` and never on thread scheduling.
    """

    def __init__(self, workers: int = 4, chunk_size: int = 1024) -> None:
        _require_positive_int("workers", workers)
        _require_positive_int("chunk_size", chunk_size)
        self._chunk_size = chunk_size
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="gradient-reduce")
        self._sequential = SequentialReducer()

    def reduce(self, contributions: Sequence[Gradient]) -> Gradient:
        if len(contributions) <= self._chunk_size:
            return self._sequential.reduce(contributions)
        chunks = [
            contributions[start : start + self._chunk_size]
            for start in range(0, len(contributions), self._chunk_size)
        ]
        partials = self._executor.map(self._sequential.reduce, chunks)
        return self._sequential.reduce(list(partials))

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "ThreadedReducer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _require_positive_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidHyperparameterError(f"{name} must be a positive integer, got {value!r}")


def validate_hyperparameters(epochs: int, learning_rate: float) -> None:
    """Reject non-positive epoch counts and learning rates."""

    _require_positive_int("epochs", epochs)
    if (
        isinstance(learning_rate, bool)
        or not isinstance(learning_rate, numbers.Real)
        or math.isnan(learning_rate)
        or learning_rate <= 0
    ):
        raise InvalidHyperparameterError(f"learning_rate must be a positive number, got {learning_rate!r}")


def update_params(params: Params, step: Gradient, learning_rate: float) -> Params:
    """Move the parameters against the gradient by ``learning_rate``."""

    return Params(
        weight=params.weight - learning_rate * step.d_weight,
        bias=params.bias - learning_rate * step.d_bias,
    )


def batch_gradient(samples: Sequence[Sample], params: Params, reducer: GradientReducer) -> Gradient:
    """Mean MSE gradient over ``samples`` at ``params``."""

    size = len(samples)
    contributions = [
        gradient(sample.area, sample_error(predict(sample.area, params), sample.price), size) for sample in samples
    ]
    return reducer.reduce(contributions)


class Trainer:
    """Fixed-epoch gradient-descent trainer.

    Args:
        epochs: Number of full passes over the dataset.
        learning_rate: Step size applied to the batch gradient.
        reducer: Strategy for summing per-sample gradients. Defaults to a
            sequential fold.
    """

    def __init__(
        self,
        epochs: int = DEFAULT_EPOCHS,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        reducer: GradientReducer | None = None,
    ) -> None:
        validate_hyperparameters(epochs, learning_rate)
        self._epochs = epochs
        self._learning_rate = learning_rate
        self._reducer = reducer or SequentialReducer()

    @property
    def epochs(self) -> int:
        return self._epochs

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    def run(self, samples: Iterable[Sample]) -> Params:
        """Train on already normalized samples and return the final parameters."""

        sample_list = tuple(samples)
        if not sample_list:
            raise ValueError("At least one sample is required for training")

        logger.info(
            "training_started",
            extra={"epochs": self._epochs, "learning_rate": self._learning_rate, "samples": len(sample_list)},
        )
        params = Params.zero()
        for _ in range(self._epochs):
            step = batch_gradient(sample_list, params, self._reducer)
            params = update_params(params, step, self._learning_rate)

        if not (math.isfinite(params.weight) and math.isfinite(params.bias)):
            logger.warning(
                "training_diverged",
                extra={"weight": params.weight, "bias": params.bias, "learning_rate": self._learning_rate},
            )
        else:
            logger.info("training_finished", extra={"weight": params.weight, "bias": params.bias})
        return params


def train(
    samples: Iterable[Sample],
    epochs: int = DEFAULT_EPOCHS,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    reducer: GradientReducer | None = None,
) -> Params:
    """Functional form of :meth:`Trainer.run`."""

    return Trainer(epochs=epochs, learning_rate=learning_rate, reducer=reducer).run(samples)
