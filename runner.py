#!/usr/bin/env python3
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing,
#  software distributed under the License is distributed on an
#  "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
#  KIND, either express or implied.  See the License for the
#  specific language governing permissions and limitations
#  under the License.

"""
SpatiaLite Demo Runner

A CLI tool for running the SpatiaLite examples against an in-memory or
file-backed database.

Usage Examples:
    # Seed an in-memory database with tourist places (example 1)
    python runner.py --example-id 1

    # Seed a database file; running it again adds the places again
    python runner.py -i 1 -n places.db

    # Import ../shp/BR_UF_2022 and look up which state holds each place
    python runner.py -i 2 -n states.db

    # List available examples
    python runner.py --list-examples
"""

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from spatialite_demo.engine import MEMORY_DATABASE
from spatialite_demo.errors import CliError
from spatialite_demo.examples import get_example, list_examples

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


class UsageOnErrorParser(argparse.ArgumentParser):
    """ArgumentParser that answers malformed options with the usage text.

    An option missing its argument prints the help and exits 0, the same
    as an unknown option.
    """

    def error(self, message: str) -> NoReturn:
        logger.debug(f"Argument error: {message}")
        self.print_help(sys.stdout)
        self.exit(0)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageOnErrorParser(
        description="SpatiaLite Demo Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --example-id 1
  %(prog)s --example-id 1 --db-name places.db
  %(prog)s --example-id 2 --db-name states.db
  %(prog)s --list-examples
        """,
    )

    parser.add_argument(
        "--example-id",
        "-i",
        type=str,
        default="0",
        metavar="<id>",
        help=f"ID of the example to run. Available: "
        f"{', '.join(str(i) for i in list_examples())}",
    )

    parser.add_argument(
        "--db-name",
        "-n",
        type=str,
        metavar="<name>",
        help="Name of the database file (if not provided, in-memory)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose (debug) logging",
    )

    parser.add_argument(
        "--list-examples",
        action="store_true",
        help="List available examples and exit",
    )

    return parser


def parse_example_id(value: str) -> int:
    """Convert the --example-id value.

    Raises:
        CliError: If the value is not an integer
    """
    try:
        return int(value)
    except ValueError as e:
        raise CliError(f"Unknown example ID: {value}") from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the demo runner."""
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    # Unknown options are answered with the usage text
    if any(extra.startswith("-") for extra in extras):
        parser.print_help(sys.stdout)
        return 0

    if extras:
        logger.error(f"Unexpected argument: {extras[0]}")
        return 1

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_examples:
        print("Available examples:")
        for example_id in list_examples():
            example = get_example(example_id)
            print(f"  {example_id}: {example.description}")
        return 0

    if args.db_name:
        db_name = args.db_name
    else:
        logger.info("Using in-memory database")
        db_name = MEMORY_DATABASE

    try:
        example = get_example(parse_example_id(args.example_id))
    except CliError as e:
        logger.error(str(e))
        return e.exit_code

    logger.info(f"Running example {example.example_id}...")
    return example.execute(db_name)


if __name__ == "__main__":
    sys.exit(main())
