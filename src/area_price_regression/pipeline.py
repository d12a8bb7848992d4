"""End-to-end fitting and raw-unit prediction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .model import Params, Sample, predict
from .scaling import Scale, normalize_dataset
from .training import DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE, GradientReducer, Trainer


@dataclass(frozen=True)
class TrainedModel:
    """Learned parameters bundled with the scales used during training."""

    areas: Scale
    prices: Scale
    params: Params

    def predict_raw(self, raw_area: float) -> float:
        """Predict a raw price for a raw area.

        Areas outside the training range, or in gaps between training points,
        are extrapolated/interpolated linearly.
        """

        predicted = predict(self.areas.normalize(raw_area), self.params)
        return self.prices.denormalize(predicted)

    def mse(self, samples: Iterable[Sample]) -> float:
        """Mean-squared error of :meth:`predict_raw` over raw samples."""

        residuals = [self.predict_raw(sample.area) - sample.price for sample in samples]
        if not residuals:
            raise ValueError("samples must be non-empty")
        return sum(residual * residual for residual in residuals) / len(residuals)


def fit(
    dataset: Iterable[Sample],
    epochs: int = DEFAULT_EPOCHS,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    reducer: GradientReducer | None = None,
) -> TrainedModel:
    """Normalize ``dataset``, train on it and return a raw-unit predictor."""

    trainer = Trainer(epochs=epochs, learning_rate=learning_rate, reducer=reducer)
    normalized = normalize_dataset(list(dataset))
    params = trainer.run(normalized.samples)
    return TrainedModel(areas=normalized.areas, prices=normalized.prices, params=params)
