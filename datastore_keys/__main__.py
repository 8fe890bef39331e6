"""Interface for ``python -m datastore_keys``."""

from __future__ import annotations

from argparse import ArgumentParser
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

from . import __version__


__all__ = ["main"]


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="datastore_keys")
    _ = parser.add_argument("-v", "--version", action="version", version=__version__)
    _ = parser.parse_args(args)


if __name__ == "__main__":
    main()
