"""Linear model types and evaluation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    """One labeled example.

    Attributes:
        area: Input feature (m² for houses).
        price: Label (euros for houses).
    """

    area: float
    price: float


@dataclass(frozen=True)
class Params:
    """Model parameters for ``y = weight * x + bias``."""

    weight: float
    bias: float

    @classmethod
    def zero(cls) -> "Params":
        return cls(weight=0.0, bias=0.0)


def predict(x: float, params: Params) -> float:
    """Evaluate the linear hypothesis at ``x``."""

    return params.weight * x + params.bias
