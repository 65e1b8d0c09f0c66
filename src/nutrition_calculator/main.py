"""Command-line entrypoint for the nutrition calculator."""

import argparse
from collections.abc import Sequence

from nutrition_calculator.domain.nutrition import DEFAULT_PORTION, PortionInput
from nutrition_calculator.services.report import build_report, render_text


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with per-100 g and portion options."""
    parser = argparse.ArgumentParser(
        prog="nutrition-calculator",
        description="Totals, macro split and label consistency for a portion.",
    )
    parser.add_argument("--kcal", type=float, default=DEFAULT_PORTION.calories_per_100)
    parser.add_argument("--fat", type=float, default=DEFAULT_PORTION.fat_per_100)
    parser.add_argument("--carb", type=float, default=DEFAULT_PORTION.carb_per_100)
    parser.add_argument(
        "--protein", type=float, default=DEFAULT_PORTION.protein_per_100
    )
    parser.add_argument(
        "--grams", type=float, default=DEFAULT_PORTION.grams_per_serving
    )
    parser.add_argument(
        "--servings", type=float, default=DEFAULT_PORTION.serving_count
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print a nutrition report for the given label values."""
    args = build_parser().parse_args(argv)
    portion = PortionInput(
        calories_per_100=args.kcal,
        fat_per_100=args.fat,
        carb_per_100=args.carb,
        protein_per_100=args.protein,
        grams_per_serving=args.grams,
        serving_count=args.servings,
    )
    print(render_text(build_report(portion)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
