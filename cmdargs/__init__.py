"""Small command-line argument parser with typed accessors."""

from __future__ import annotations

from .config import ParserConfig, get_runtime_config, reload_config
from .display import format_args, print_args
from .errors import ArgumentError, MissingKeyError, MissingValueError
from .parser import CommandArgs, parse
from .version import __version__

__all__ = [
    "ArgumentError",
    "CommandArgs",
    "MissingKeyError",
    "MissingValueError",
    "ParserConfig",
    "__version__",
    "format_args",
    "get_runtime_config",
    "parse",
    "print_args",
    "reload_config",
]
