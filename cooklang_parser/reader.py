#!/usr/bin/env python3
"""
Recipe Reader - Print Cooklang recipes

Parses one or more `.cook` files and prints each as a readable listing or
as JSON.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .const import CONF_PERMISSIVE_NEWLINES, DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL
from .services.recipe_formatter import render_recipe
from .services.recipe_service import encode_recipe, read_recipe_file

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse Cooklang recipe files and print them"
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Recipe files to read"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed recipe as JSON instead of a listing"
    )
    parser.add_argument(
        "--strict-newlines",
        action="store_true",
        help="Only treat CRLF, LF and CR as line breaks"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the recipe reader."""
    load_dotenv()

    args = _build_arg_parser().parse_args(argv)

    level = "DEBUG" if args.verbose else os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = DEFAULT_LOG_LEVEL
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    options = {CONF_PERMISSIVE_NEWLINES: not args.strict_newlines}

    for path in args.files:
        if not path.is_file():
            sys.stderr.write(f"Recipe {path} does not exist.\n")
            return 1

        try:
            result = read_recipe_file(path, options)
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            return 1

        if args.json:
            print(encode_recipe(result.recipe))
        else:
            print(render_recipe(result.recipe))

    return 0


if __name__ == "__main__":
    sys.exit(main())
