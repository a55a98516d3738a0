"""
rust-elm-types-devtest - write the built-in sample spec as YAML

Usage:
    rust-elm-types-devtest [-o OUTPUT] [-q] [-v...]
"""

import argparse
import sys
from typing import NoReturn

from rust_elm_types.cli import add_logging_arguments, guarded
from rust_elm_types.cli_file_io import STDIO_FILENAME
from rust_elm_types.core.engine.config_model import DumpOptions
from rust_elm_types.core.engine.runner import run_dump
from rust_elm_types.logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rust-elm-types-devtest",
        description="Write the built-in sample spec as YAML",
    )
    parser.add_argument("-o", "--output", default=STDIO_FILENAME, help="Output file")
    add_logging_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    args = build_parser().parse_args(argv)
    configure_logging(quiet=args.quiet, verbosity=args.verbose)

    options = DumpOptions(output=args.output, quiet=args.quiet, verbose=args.verbose)
    sys.exit(guarded(lambda: run_dump(options)))


if __name__ == "__main__":
    main()
