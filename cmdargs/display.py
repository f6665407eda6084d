"""Human-readable summaries of parsed arguments."""

from __future__ import annotations

import sys
from typing import IO, List, Optional

from .colors import color
from .parser import CommandArgs

__all__ = ["format_args", "print_args"]

EMPTY_MESSAGE = "No command-line arguments."
HEADER = "Command-line arguments are:"


def format_args(args: CommandArgs) -> List[str]:
    if args.is_empty:
        return [EMPTY_MESSAGE]

    lines = [HEADER]
    if args.help:
        lines.append("--help")
    if args.verbose:
        lines.append("--verbose")
    if args.infile:
        lines.append(f"infile: {args.infile}")
    if args.outfile:
        lines.append(f"outfile: {args.outfile}")
    lines.extend(f"{key}: {value}" for key, value in args.values.items())
    return lines


def print_args(args: CommandArgs, stream: Optional[IO[str]] = None) -> None:
    """Write the summary of ``args`` to ``stream`` (stdout by default)."""

    out = stream if stream is not None else sys.stdout
    lines = format_args(args)
    first, rest = lines[0], lines[1:]
    fg = "yellow" if args.is_empty else "cyan"
    print(color(first, fg=fg, bold=True, stream=out), file=out)
    for line in rest:
        print(line, file=out)
