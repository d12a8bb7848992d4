"""Per-sample error and gradient of the mean-squared error."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Gradient:
    """Partial derivatives of the loss with respect to weight and bias."""

    d_weight: float
    d_bias: float

    @classmethod
    def zero(cls) -> "Gradient":
        return cls(d_weight=0.0, d_bias=0.0)

    def __add__(self, other: "Gradient") -> "Gradient":
        if not isinstance(other, Gradient):
            return NotImplemented
        return Gradient(d_weight=self.d_weight + other.d_weight, d_bias=self.d_bias + other.d_bias)

    def __mul__(self, factor: float) -> "Gradient":
        if isinstance(factor, Gradient):
            return NotImplemented
        return Gradient(d_weight=self.d_weight * factor, d_bias=self.d_bias * factor)

    __rmul__ = __mul__


def sample_error(predicted: float, actual: float) -> float:
    """Signed residual. The sign sets the direction of descent."""

    return predicted - actual


def gradient(x: float, error: float, dataset_size: int) -> Gradient:
    """Gradient contribution of one sample to the batch MSE.

    The contribution is pre-divided by ``dataset_size`` so that summing it over
    every sample yields the mean gradient directly.

    Args:
        x: Sample input.
        error: Signed residual from :func:`sample_error`.
        dataset_size: Number of samples in the batch.
    """

    if dataset_size <= 0:
        raise ValueError("dataset_size must be positive")
    scale = 2.0 / dataset_size
    return Gradient(d_weight=scale * error * x, d_bias=scale * error)
