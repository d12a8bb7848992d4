"""Compare learning rates on the sample house dataset.

Each run uses the same fixed epoch budget, so the table shows how far each
rate gets (or whether it diverges) without any early stopping.
"""

from __future__ import annotations

from dataclasses import dataclass

from area_price_regression.datasets import HOUSES
from area_price_regression.metrics import mean_squared_error
from area_price_regression.scaling import normalize_dataset
from area_price_regression.training import train


@dataclass
class SweepResult:
    learning_rate: float
    weight: float
    bias: float
    mse: float


def run(learning_rates: tuple[float, ...] = (0.001, 0.01, 0.05, 0.1, 0.5, 1.0), epochs: int = 3000) -> list[SweepResult]:
    data = normalize_dataset(HOUSES).samples
    results = []
    for learning_rate in learning_rates:
        params = train(data, epochs=epochs, learning_rate=learning_rate)
        results.append(SweepResult(learning_rate, params.weight, params.bias, mean_squared_error(data, params)))
    return results


if __name__ == "__main__":
    for result in run():
        print(f"lr={result.learning_rate:<6g} weight={result.weight:.4f} bias={result.bias:.4f} mse={result.mse:.6e}")
