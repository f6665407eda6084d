"""Demonstration entrypoint: parse the process arguments and print them."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence

from .colors import color
from .config import ParserConfig, get_runtime_config
from .display import print_args
from .errors import ArgumentError
from .parser import parse

_LOGGER = logging.getLogger("cmdargs.cli")

EXIT_USAGE = 2


def _configure_logging(config: ParserConfig) -> None:
    if not config.log_level:
        return
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args_list: List[str] = list(argv) if argv is not None else sys.argv[1:]
    config = get_runtime_config()
    _configure_logging(config)

    print()
    try:
        args = parse(args_list, config=config)
    except ArgumentError as exc:
        _LOGGER.debug("parse failed for %r", args_list)
        print(color(f"error: {exc}", fg="red", stream=sys.stderr), file=sys.stderr)
        return EXIT_USAGE
    print_args(args)
    return 0


__all__ = ["main"]
