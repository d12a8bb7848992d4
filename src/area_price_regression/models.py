"""Pydantic models for validating raw dataset rows."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .model import Sample


class SampleRecord(BaseModel):
    """Validated (area, price) row."""

    model_config = ConfigDict(extra="ignore")

    area: float = Field(gt=0.0, allow_inf_nan=False)
    price: float = Field(allow_inf_nan=False)

    def to_sample(self) -> Sample:
        return Sample(area=self.area, price=self.price)
