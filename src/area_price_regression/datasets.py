"""Sample data and dataset loading."""

from __future__ import annotations

from pathlib import Path

import csv
import io
import logging

from pydantic import ValidationError

from .errors import DatasetError
from .model import Sample
from .models import SampleRecord

logger = logging.getLogger(__name__)

# House areas (m²) and prices (euros). There are no houses between 95 and
# 140 m², nor between 140 and 220 m².
HOUSES: tuple[Sample, ...] = (
    Sample(area=35.0, price=120000.0),
    Sample(area=52.0, price=155000.0),
    Sample(area=70.0, price=210000.0),
    Sample(area=95.0, price=260000.0),
    Sample(area=140.0, price=340000.0),
    Sample(area=220.0, price=480000.0),
)


def load_samples(path: str | Path) -> list[Sample]:
    """Read samples from a CSV file with an ``area,price`` header.

    Raises:
        DatasetError: If the file cannot be read, a row is malformed or the
            file holds no rows.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetError(f"{path}: cannot read dataset: {exc}") from exc

    samples: list[Sample] = []
    reader = csv.DictReader(io.StringIO(text))
    missing = {"area", "price"} - set(reader.fieldnames or ())
    if missing:
        raise DatasetError(f"{path}: missing column(s) {', '.join(sorted(missing))}")
    for row in reader:
        try:
            record = SampleRecord.model_validate(row)
        except ValidationError as exc:
            raise DatasetError(f"{path}:{reader.line_num}: invalid row {row!r}") from exc
        samples.append(record.to_sample())
    if not samples:
        raise DatasetError(f"{path}: no samples")
    logger.info("dataset_loaded", extra={"path": str(path), "samples": len(samples)})
    return samples
