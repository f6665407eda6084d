"""Repository-level entrypoint for the cmdargs demonstration CLI."""

from __future__ import annotations

import sys
from typing import Sequence

from cmdargs.cli import main as cli_main


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    return cli_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
