"""Train the two-layer classifier on a labelled CSV file."""

from __future__ import annotations

import argparse
import logging
import sys

from shallownet.config import TrainingConfig
from shallownet.errors import DataIOError, ParseError, ShallowNetError
from shallownet.training.pipeline import run_training


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train a two-layer sigmoid classifier on a CSV file")
    parser.add_argument("csv_path", type=str, help="CSV with a header row; last column is the integer label")
    parser.add_argument("--hidden-size", type=int, default=16)
    parser.add_argument("--learning-rate", type=float, default=0.1)
    parser.add_argument("--epochs", type=int, default=1000)
    parser.add_argument("--feature-scale", type=float, default=100.0)
    parser.add_argument("--chart-path", type=str, default="output.png")
    parser.add_argument("--no-chart", action="store_true", help="Skip rendering the accuracy chart")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while training")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = TrainingConfig(
            hidden_size=args.hidden_size,
            learning_rate=args.learning_rate,
            epochs=args.epochs,
            feature_scale=args.feature_scale,
            chart_path=None if args.no_chart else args.chart_path,
            seed=args.seed,
            progress=args.progress,
        )
    except ValueError as exc:
        print(f"Invalid arguments: {exc}", file=sys.stderr)
        return 1

    try:
        report = run_training(args.csv_path, config)
    except (DataIOError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ShallowNetError as exc:
        print(f"Training failed: {exc}", file=sys.stderr)
        return 1

    print(
        f"Trained on samples={report.num_samples}, features={report.num_features}, "
        f"classes={report.num_classes}"
    )
    print(report.summary())
    if report.chart_path is not None:
        print(f"Saved chart to {report.chart_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
