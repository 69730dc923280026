#!/usr/bin/env python
"""
Generate the game's sound effects as mono 16-bit 44.1kHz WAV files.

Usage:
    python -m sfxgen
    python -m sfxgen --output-dir ./sounds --only tick --only correct
    python -m sfxgen --catalog my_sounds.yaml --debug
    python -m sfxgen --list
"""

import argparse
import logging
import sys
from typing import List, Optional

from sfxgen.catalog import BUILTIN_EFFECTS, load_catalog
from sfxgen.common.config import GeneratorConfig, load_settings
from sfxgen.core.catalog_driver import generate_catalog, get_default_output_dir
from sfxgen.core.errors import SfxGenError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfxgen",
        description="Synthesize tone-based sound effects to WAV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Generate every built-in effect into assets/sounds
    python -m sfxgen

    # Generate two effects into a custom folder
    python -m sfxgen --output-dir ./out --only tick --only victory

    # Use effects defined in a YAML file
    python -m sfxgen --catalog effects.yaml
""",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for generated files (default: <repo>/assets/sounds)",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="YAML catalog to use instead of the built-in effects",
    )
    parser.add_argument(
        "--only",
        action="append",
        default=None,
        metavar="NAME",
        help="Generate only this effect (repeatable)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON settings file (keys: output_dir, catalog, only, debug)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List catalog entries and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_settings(args.config) if args.config else GeneratorConfig()
        config = config.merged(
            output_dir=args.output_dir,
            catalog_path=args.catalog,
            only=args.only,
            debug=args.debug,
        )
        if config.debug:
            logging.getLogger().setLevel(logging.DEBUG)

        effects = load_catalog(config.catalog_path) if config.catalog_path else BUILTIN_EFFECTS

        if args.list:
            for effect in effects:
                print(f"{effect.name:<12} {len(effect.tones)} tone(s)  {effect.description}")
            return 0

        output_dir = config.output_dir or get_default_output_dir()
        print("Generating sounds...\n")
        summary = generate_catalog(effects, output_dir, only=config.only)
    except SfxGenError as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("Filesystem error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Output directory: {summary.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
