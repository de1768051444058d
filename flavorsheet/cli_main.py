# -*- coding: utf-8 -*-
"""
FlavorSheet CLI Main Module
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from flavorsheet.core.block_splitter import normalize_creature_id
from flavorsheet.core.db_parser import DbParser
from flavorsheet.core.exceptions import FlavorSheetError
from flavorsheet.core.output_formatter import SheetFormatter, filter_records
from flavorsheet.utils.config import ConfigManager, load_config_override
from flavorsheet.version import VERSION


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def build_config(args) -> ConfigManager:
    """Defaults, then --config file, then explicit CLI args."""
    config_manager = ConfigManager(config_file=None)

    if getattr(args, 'config', None):
        config_manager.apply_overrides(load_config_override(args.config))

    if getattr(args, 'source', None):
        config_manager.extraction_settings.source_file = args.source
    if getattr(args, 'workers', None):
        config_manager.extraction_settings.parser_workers = args.workers
    if getattr(args, 'output', None):
        config_manager.output_settings.output_file = args.output
    if getattr(args, 'format', None):
        config_manager.output_settings.output_format = args.format
    if getattr(args, 'only_with_texts', False):
        config_manager.output_settings.only_with_texts = True

    return config_manager


def run_extract_command(args) -> int:
    """Parse the db file and write the flavor text sheet."""
    config_manager = build_config(args)
    extraction = config_manager.extraction_settings
    output = config_manager.output_settings

    print(f"parsing db file {extraction.source_file}")

    parser = DbParser(config_manager)
    charas = parser.parse_file(extraction.source_file)
    charas_with_talks = [c for c in charas if c.has_flavor_texts()]

    print(f"{len(charas)} charas parsed from db")
    print(f"{len(charas_with_talks)} charas with flavor texts")
    print("making sheets...")

    formatter = SheetFormatter.from_settings(output)
    records = filter_records(charas, output.only_with_texts)
    saved = formatter.write(records, output.output_file, output.output_format)

    print(f"saved {os.path.abspath(saved)}")
    return 0


def run_show_command(args) -> int:
    """Print one creature record as JSON."""
    config_manager = build_config(args)
    parser = DbParser(config_manager)
    charas = parser.parse_file(config_manager.extraction_settings.source_file)

    wanted = normalize_creature_id(args.creature_id)
    for chara in charas:
        if chara.id == wanted:
            print(json.dumps(chara.to_dict(), ensure_ascii=False, indent=2))
            return 0

    print(f"Error: creature not found: {args.creature_id}")
    return 1


def add_common_arguments(parser: argparse.ArgumentParser, subcommand: bool = False):
    # Subcommand copies must not overwrite options given before the subcommand
    defaults = {'default': argparse.SUPPRESS} if subcommand else {}
    parser.add_argument("--config", help="Path to JSON configuration file", **defaults)
    parser.add_argument("--workers", type=int, help="Parse creatures on this many threads", **defaults)
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging", **defaults)


def add_extract_arguments(parser: argparse.ArgumentParser, subcommand: bool = False):
    defaults = {'default': argparse.SUPPRESS} if subcommand else {}
    if subcommand:
        parser.add_argument("source", nargs='?', default=None,
                            help="Path to the creature db script (default: ./db_creature.hsp)")
    parser.add_argument("--output", "-o", help="Output file (default: db_2_elin.xlsx)", **defaults)
    parser.add_argument("--format", "-f", choices=["xlsx", "csv"], help="Output format", **defaults)
    parser.add_argument("--only-with-texts", action="store_true",
                        help="Skip creatures without flavor texts", **defaults)
    add_common_arguments(parser, subcommand)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=f"FlavorSheet v{VERSION} CLI")
    # No subcommand: extract using the configured source file
    add_extract_arguments(parser)

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # EXTRACT command (default)
    extract_parser = subparsers.add_parser('extract', help='Extract flavor texts into a spreadsheet')
    add_extract_arguments(extract_parser, subcommand=True)

    # SHOW command
    show_parser = subparsers.add_parser('show', help='Print one creature record as JSON')
    show_parser.add_argument("creature_id", help="Creature id, e.g. putit or CREATURE_ID_PUTIT")
    show_parser.add_argument("source", nargs='?', default=None, help="Path to the creature db script")
    add_common_arguments(show_parser, subcommand=True)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.command == 'show':
            return run_show_command(args)
        return run_extract_command(args)
    except FlavorSheetError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
