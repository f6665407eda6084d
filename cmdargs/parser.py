"""Token classification and typed accessors for command-line arguments.

Usage::

    # program --key value in/file/path -o out/file/path -h -v
    args = parse()

    if args.help:
        ...
    with open(args.outfile, "w") as out, open(args.infile) as src:
        ...
    value = args.get("key")
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, TypeVar

from .config import ParserConfig
from .errors import MissingKeyError, MissingValueError

__all__ = ["CommandArgs", "parse"]

T = TypeVar("T")

_LOGGER = logging.getLogger("cmdargs.parser")

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(slots=True)
class CommandArgs:
    """Parsed view of an argument vector."""

    help: bool = False
    verbose: bool = False
    infile: str = ""
    outfile: str = ""
    values: Dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not (self.help or self.verbose or self.infile or self.outfile or self.values)

    def has(self, key: str) -> bool:
        return key in self.values

    def get(self, key: str) -> str:
        """Return the raw value for ``key`` or an empty string when absent."""

        return self.values.get(key, "")

    def get_bool(self, key: str, *, numeric: bool = False) -> bool:
        """Interpret ``key`` as a boolean.

        Leading whitespace is skipped and trailing text ignored. Textual mode
        reads ``true`` as ``True``; numeric mode reads any non-zero leading
        integer as ``True``. Anything else is ``False``. Raises
        ``MissingKeyError`` for absent keys.
        """

        if not self.has(key):
            raise MissingKeyError(key)
        raw = self.values[key]
        if not numeric:
            return raw.lstrip().startswith("true")
        match = _LEADING_INTEGER.match(raw)
        return match is not None and int(match.group(1)) != 0

    def get_as(self, key: str, converter: Callable[[str], T]) -> T:
        """Return ``converter(value)``; exceptions from the converter propagate."""

        if not self.has(key):
            raise MissingKeyError(key)
        return converter(self.values[key])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _option_key(token: str) -> str:
    if token.startswith("--"):
        return token[2:]
    if token.startswith("-"):
        return token[1:]
    return ""


def parse(
    argv: Optional[Sequence[str]] = None,
    *,
    config: Optional[ParserConfig] = None,
) -> CommandArgs:
    """Classify ``argv`` (program name excluded) into a ``CommandArgs``.

    ``argv`` defaults to ``sys.argv[1:]``. Raises ``MissingValueError`` when an
    option is the final token.
    """

    tokens = list(sys.argv[1:] if argv is None else argv)
    cfg = config if config is not None else ParserConfig()
    args = CommandArgs()

    index = 0
    while index < len(tokens):
        token = tokens[index]
        flag = cfg.flags.get(token)
        if flag is not None:
            attribute, value = flag
            setattr(args, attribute, value)
            _LOGGER.debug("flag %s -> %s=%s", token, attribute, value)
            index += 1
            continue

        key = _option_key(token)
        if key:
            if index + 1 >= len(tokens):
                raise MissingValueError(token)
            value = tokens[index + 1]
            if key in cfg.output_keys:
                args.outfile = value
                _LOGGER.debug("outfile <- %r", value)
            else:
                if key in args.values:
                    _LOGGER.debug("overwriting %r (was %r)", key, args.values[key])
                args.values[key] = value
                _LOGGER.debug("option %r <- %r", key, value)
            index += 2
            continue

        args.infile = token
        _LOGGER.debug("infile <- %r", token)
        index += 1

    return args
