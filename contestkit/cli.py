"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="contestkit",
        description="Solutions to programming contest puzzles.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and return the exit status."""
    _parser().parse_args(argv)
    return 0