#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Salted Hash ID Codec
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/hashid_cli.py

"""
Command-line front end for encoding and decoding hash IDs in batches.

Each positional item (and each non-blank line of `--input-file`) is processed
on its own. Results are printed as "<item>: <output>" on stdout. A failing
item is reported as "<item>: <error>" on stderr and the remaining items are
still processed.

Defaults for --salt, --alphabet and --min are read from the [HashIds] section
of config.ini; HASHIDS_SALT (environment or .env) overrides the salt.

Command-Line Usage:
    # Encode two lists of integers
    python src/hashid_cli.py --salt "this is my salt" 45,434,1313,99 7

    # Decode hash IDs
    python src/hashid_cli.py --salt "this is my salt" -d 7nnhzEsDkiYa

    # Decode a file of hash IDs with a progress bar
    python src/hashid_cli.py -d --input-file ids.txt --progress
"""

import argparse
import logging
import os
import sys

from colorama import Fore, init
from tqdm import tqdm

from hashid_engine import HashIdEngine


def parse_numbers(item: str, separator: str) -> list:
    """Splits an item on `separator` and parses each piece as an integer (0x/0o/0b allowed)."""
    try:
        return [int(piece.strip(), 0) for piece in item.split(separator)]
    except ValueError as e:
        raise ValueError(f"invalid integer list: {e}") from None


def read_items(input_file: str) -> list:
    """Returns the non-blank, stripped lines of `input_file`."""
    with open(input_file, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def process_item(engine: HashIdEngine, item: str, decode: bool, separator: str) -> str:
    """Encodes or decodes a single item and returns the printable result."""
    if decode:
        return separator.join(str(n) for n in engine.decode(item))
    return engine.encode(parse_numbers(item, separator))


def main(argv=None):
    """Parses arguments, builds the engine and processes every item."""
    init(autoreset=True)
    from config_loader import get_engine_settings, load_app_config, load_env_vars

    load_env_vars()
    defaults = get_engine_settings(load_app_config())

    parser = argparse.ArgumentParser(
        description="Encode integer lists into hash IDs, or decode hash IDs back into integers.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("items", nargs="*", help="Integer lists to encode, or hash IDs to decode with -d.")
    parser.add_argument("--salt", default=defaults['salt'], help="Salt used to shuffle the alphabet.")
    parser.add_argument("--alphabet", default=defaults['alphabet'], help="Alphabet to draw characters from (minimum 16 characters).")
    parser.add_argument("--min", dest="min_length", type=int, default=defaults['min_length'], help="Minimum length of encoded hash IDs.")
    parser.add_argument("-d", "--decode", action="store_true", help="Decode hash IDs instead of encoding integers.")
    parser.add_argument("--sep", default=",", help="Separator between integers.")
    parser.add_argument("--input-file", help="Read additional items from this file, one per line.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar on stderr.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format=f"{Fore.YELLOW}%(levelname)s:{Fore.RESET} %(message)s")

    items = list(args.items)
    if args.input_file:
        try:
            items.extend(read_items(args.input_file))
        except OSError as e:
            logging.error(f"Could not read input file '{os.path.relpath(args.input_file)}': {e}")
            return 1

    if not items:
        parser.print_usage(sys.stderr)
        return 1

    try:
        engine = HashIdEngine(alphabet=args.alphabet, salt=args.salt, min_length=args.min_length)
    except ValueError as e:
        print(f"{Fore.RED}ERROR: {e}{Fore.RESET}", file=sys.stderr)
        return 1
    logging.debug(f"Using {engine!r}")

    failures = 0
    for item in tqdm(items, desc="Decoding" if args.decode else "Encoding", unit="item",
                     disable=not args.progress, file=sys.stderr):
        try:
            result = process_item(engine, item, args.decode, args.sep)
        except (ValueError, TypeError) as e:
            failures += 1
            print(f"{Fore.RED}{item}: {e}{Fore.RESET}", file=sys.stderr)
            continue
        print(f"{item}: {result}")

    if failures:
        logging.debug(f"{failures} of {len(items)} item(s) failed.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# === End of src/hashid_cli.py ===
