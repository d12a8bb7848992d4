"""Command line entry point: train on a dataset and price some areas."""

from __future__ import annotations

import argparse
import math
import sys

from pydantic import ValidationError

from .config import RegressionSettings
from .datasets import HOUSES, load_samples
from .errors import RegressionError
from .logging_utils import configure_logging
from .pipeline import fit


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fit price as a linear function of area and predict prices")
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("--data", help="CSV file with area,price columns (defaults to the sample houses)")
    parser.add_argument("--epochs", type=int, help="Override the configured epoch count")
    parser.add_argument("--learning-rate", type=float, help="Override the configured learning rate")
    parser.add_argument(
        "--area",
        type=float,
        action="append",
        help="Area to price; may be repeated (default: 110)",
    )
    return parser


def _round_price(price: float) -> int | float:
    # Halves round up; diverged training yields nan/inf, which are shown as-is.
    if not math.isfinite(price):
        return price
    return math.floor(price + 0.5)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        settings = RegressionSettings.from_toml(args.config) if args.config else RegressionSettings()
        configure_logging(settings.logging)
        training = settings.training
        epochs = args.epochs if args.epochs is not None else training.epochs
        learning_rate = args.learning_rate if args.learning_rate is not None else training.learning_rate
        dataset = load_samples(args.data) if args.data else HOUSES

        reducer = training.build_reducer()
        try:
            model = fit(dataset, epochs=epochs, learning_rate=learning_rate, reducer=reducer)
        finally:
            close = getattr(reducer, "close", None)
            if close is not None:
                close()
    except (RegressionError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("=== Trained model ===")
    print(f"weight = {model.params.weight:.3f} | bias = {model.params.bias:.3f}")
    for area in args.area or [110.0]:
        price = model.predict_raw(area)
        print(f"Predicted price for a house of {area:g} m²: €{_round_price(price)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
