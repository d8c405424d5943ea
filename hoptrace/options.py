"""Command-line option parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class UsageError(Exception):
    """Raised when the command line does not hold exactly one host."""


@dataclass(frozen=True)
class Options:
    """Settings taken from the command line."""

    host: str


def parse_options(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    if len(argv) != 1:
        raise UsageError("Need 1 arguments")
    return Options(host=argv[0])