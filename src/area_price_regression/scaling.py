"""Min-max normalization of samples into the [0, 1] interval.

Both dimensions of a dataset are rescaled independently. A fitted scale keeps
its range so predictions made in normalized space can be mapped back to raw
units, including values outside the range seen during fitting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import logging
import math

from .errors import DegenerateScaleError
from .model import Sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scale:
    """Range of a single feature.

    Attributes:
        min: Smallest fitted value.
        max: Largest fitted value.
    """

    min: float
    max: float

    @classmethod
    def fit(cls, values: Iterable[float]) -> "Scale":
        """Compute the range of ``values``.

        Raises:
            DegenerateScaleError: If ``values`` is empty, all values are equal or
                the range is not finite.
        """

        value_list = list(values)
        if not value_list:
            raise DegenerateScaleError("Cannot fit a scale on an empty sequence")
        low = min(value_list)
        high = max(value_list)
        if high == low:
            raise DegenerateScaleError(f"Cannot fit a scale with zero range (all values are {low})")
        if not math.isfinite(high - low):
            raise DegenerateScaleError(f"Cannot fit a scale with non-finite range [{low}, {high}]")
        return cls(min=low, max=high)

    @property
    def delta(self) -> float:
        return self.max - self.min

    def normalize(self, value: float) -> float:
        return (value - self.min) / self.delta

    def denormalize(self, value: float) -> float:
        return value * self.delta + self.min


@dataclass(frozen=True)
class NormalizedDataset:
    """Samples rescaled into [0, 1] together with the scales that produced them."""

    areas: Scale
    prices: Scale
    samples: tuple[Sample, ...]


def normalize_dataset(samples: Sequence[Sample]) -> NormalizedDataset:
    """Fit one scale per dimension and rescale every sample."""

    areas = Scale.fit(sample.area for sample in samples)
    prices = Scale.fit(sample.price for sample in samples)
    normalized = tuple(
        Sample(area=areas.normalize(sample.area), price=prices.normalize(sample.price)) for sample in samples
    )
    logger.debug(
        "dataset_normalized",
        extra={"samples": len(normalized), "area_range": [areas.min, areas.max], "price_range": [prices.min, prices.max]},
    )
    return NormalizedDataset(areas=areas, prices=prices, samples=normalized)
