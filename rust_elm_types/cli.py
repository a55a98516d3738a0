"""
rust-elm-types CLI - generate Rust/Elm type definitions from a spec

Usage:
    rust-elm-types rust [spec.yaml] [-o OUTPUT] [-q] [-v...]
    rust-elm-types elm [spec.yaml] [-o OUTPUT] [--mode auto|bare|full] [-q] [-v...]
    rust-elm-types elm --demo
    rust-elm-types --version

A path of "-" (the default) selects standard input/output.
"""

import argparse
import logging
import sys
from collections.abc import Callable
from typing import NoReturn

from rust_elm_types import __version__
from rust_elm_types.cli_file_io import STDIO_FILENAME
from rust_elm_types.core.engine.config_model import RunOptions
from rust_elm_types.core.engine.loader import SpecFormatError
from rust_elm_types.core.engine.runner import run_generation
from rust_elm_types.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def guarded(action: Callable[[], None]) -> int:
    """Run an action, logging I/O and spec errors. Returns the exit status."""
    try:
        action()
    except (OSError, SpecFormatError) as e:
        logger.error(f"Program exited: {e}")
        return 1
    return 0


def add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-q", "--quiet", action="store_true", help="Silence all log messages")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rust-elm-types",
        description="Generate Rust and Elm type definitions from a struct/enum spec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"rust-elm-types {__version__}")
    parser.add_argument("target", choices=["rust", "elm"], help="Output language")
    parser.add_argument("input", nargs="?", default=STDIO_FILENAME, help="Input spec file")
    parser.add_argument("-o", "--output", default=STDIO_FILENAME, help="Output file")
    parser.add_argument(
        "--mode",
        choices=["auto", "bare", "full"],
        default="auto",
        help="Elm output mode (default: full when the spec names a module)",
    )
    parser.add_argument("--demo", action="store_true", help="Render the built-in sample spec")
    add_logging_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(quiet=args.quiet, verbosity=args.verbose)

    options = RunOptions(
        target=args.target,
        input=args.input,
        output=args.output,
        mode=args.mode,
        demo=args.demo,
        quiet=args.quiet,
        verbose=args.verbose,
    )
    sys.exit(guarded(lambda: run_generation(options)))


if __name__ == "__main__":
    main()
