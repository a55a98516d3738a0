#!/usr/bin/env python
"""
rust-elm-types CLI (fire)

Usage:
    python main.py rust <spec_file> [--output FILE]
    python main.py elm <spec_file> [--output FILE] [--mode auto|bare|full]
    python main.py demo [--output FILE]
    python main.py version
"""

import sys

import fire

from rust_elm_types import __version__
from rust_elm_types.cli import guarded
from rust_elm_types.core.engine.config_model import DumpOptions, RunOptions
from rust_elm_types.core.engine.runner import run_dump, run_generation
from rust_elm_types.logging_setup import configure_logging


class RustElmTypesCLI:
    """rust-elm-types - Rust/Elm type generator CLI"""

    def rust(
        self, spec_file: str = "-", output: str = "-", demo: bool = False, quiet: bool = False, verbose: int = 0
    ) -> None:
        """Generate Rust type definitions.

        Args:
            spec_file: Path to spec YAML file ("-" for stdin)
            output: Output file ("-" for stdout)
            demo: Render the built-in sample spec instead of reading input
            quiet: Silence all log messages
            verbose: Log verbosity (0: warnings, 1: info, 2: debug)
        """
        self._generate(RunOptions(target="rust", input=spec_file, output=output, demo=demo, quiet=quiet, verbose=verbose))

    def elm(
        self,
        spec_file: str = "-",
        output: str = "-",
        mode: str = "auto",
        demo: bool = False,
        quiet: bool = False,
        verbose: int = 0,
    ) -> None:
        """Generate Elm types with JSON decoders/encoders.

        Args:
            spec_file: Path to spec YAML file ("-" for stdin)
            output: Output file ("-" for stdout)
            mode: "auto", "bare" or "full"
            demo: Render the built-in sample spec instead of reading input
            quiet: Silence all log messages
            verbose: Log verbosity (0: warnings, 1: info, 2: debug)
        """
        self._generate(
            RunOptions(target="elm", input=spec_file, output=output, mode=mode, demo=demo, quiet=quiet, verbose=verbose)
        )

    def demo(self, output: str = "-", quiet: bool = False, verbose: int = 0) -> None:
        """Write the built-in sample spec as YAML.

        Args:
            output: Output file ("-" for stdout)
            quiet: Silence all log messages
            verbose: Log verbosity
        """
        options = DumpOptions(output=output, quiet=quiet, verbose=verbose)
        configure_logging(quiet=options.quiet, verbosity=options.verbose)
        status = guarded(lambda: run_dump(options))
        if status:
            sys.exit(status)

    def version(self) -> str:
        """Show version."""
        return f"rust-elm-types {__version__}"

    def _generate(self, options: RunOptions) -> None:
        configure_logging(quiet=options.quiet, verbosity=options.verbose)
        status = guarded(lambda: run_generation(options))
        if status:
            sys.exit(status)


def main() -> None:
    """Entry point for the fire CLI."""
    fire.Fire(RustElmTypesCLI)


if __name__ == "__main__":
    main()
