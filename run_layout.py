#!/usr/bin/env python3
"""Lay out a card catalog as a masonry grid and print the result as JSON.

Usage:
    python run_layout.py --catalog cards.yaml --width 375
    python run_layout.py --catalog cards.yaml --width 768 --columns 3 --design design.yaml
"""
import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parent))

from layout.masonry import LayoutError, MasonryLayout
from layout.providers import CardHeightProvider
from models.catalog import CardCatalog
from models.design import CardDesign
from settings import Settings

logger = logging.getLogger("run_layout")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--catalog", type=Path, required=True,
                        help="YAML file with a top-level 'cards' list")
    parser.add_argument("--width", type=float, required=True,
                        help="Viewport width in layout units")
    parser.add_argument("--design", type=Path, default=None,
                        help="design.yaml with annotation text styles (overrides MASONRY_DESIGN_PATH)")
    parser.add_argument("--columns", type=int, default=None,
                        help="Number of columns (overrides MASONRY_NUMBER_OF_COLUMNS)")
    parser.add_argument("--padding", type=float, default=None,
                        help="Cell padding (overrides MASONRY_CELL_PADDING)")
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    overrides = {}
    if args.columns is not None:
        overrides["number_of_columns"] = args.columns
    if args.padding is not None:
        overrides["cell_padding"] = args.padding
    if args.design is not None:
        overrides["design_path"] = args.design
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        logger.error("Invalid settings: %s", exc)
        return 1
    logging.getLogger().setLevel(settings.log_level)

    try:
        catalog = CardCatalog.load(args.catalog)
        design = CardDesign.load_or_default(settings.design_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Could not load input: %s", exc)
        return 1
    engine = MasonryLayout.from_settings(settings)

    try:
        result = engine.compute_layout(len(catalog), args.width, CardHeightProvider(catalog, design))
    except LayoutError as exc:
        logger.error("Layout failed: %s", exc)
        return 1

    logger.info("Laid out %d cards in %d columns", len(result), settings.number_of_columns)
    logger.info("  Content size: %.1f x %.1f", result.content_width, result.content_height)

    print(result.model_dump_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
