"""Runtime configuration loader for cmdargs."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

__all__ = [
    "DEFAULT_FLAGS",
    "DEFAULT_OUTPUT_KEYS",
    "ParserConfig",
    "get_runtime_config",
    "reload_config",
]

_CONFIG_ENV = "CMDARGS_CONFIG"
_LOG_LEVEL_ENV = "CMDARGS_LOG_LEVEL"
_DEFAULT_CONFIG_LOCATIONS: tuple[Path, ...] = (
    Path("config/cmdargs.json"),
    Path("cmdargs.json"),
)

# Attributes a flag spelling is allowed to toggle on ``CommandArgs``.
FLAG_ATTRIBUTES: tuple[str, ...] = ("help", "verbose")

DEFAULT_FLAGS: Dict[str, Tuple[str, bool]] = {
    "--help": ("help", True),
    "-h": ("help", True),
    "--verbose": ("verbose", True),
    "-v": ("verbose", True),
    "--quiet": ("verbose", False),
}

DEFAULT_OUTPUT_KEYS: tuple[str, ...] = ("o", "output")

_LOGGER = logging.getLogger("cmdargs.config")


def _parse_flags(raw: Any) -> Dict[str, Tuple[str, bool]]:
    flags = dict(DEFAULT_FLAGS)
    if not isinstance(raw, dict):
        return flags
    for spelling, target in raw.items():
        spelling = str(spelling).strip()
        if not spelling.startswith("-"):
            continue
        if isinstance(target, str):
            attribute, value = target, True
        elif isinstance(target, dict):
            attribute = str(target.get("set", ""))
            value = target.get("value", True)
            if not isinstance(value, bool):
                _LOGGER.debug("ignoring flag %r with non-boolean value %r", spelling, value)
                continue
        else:
            continue
        if attribute not in FLAG_ATTRIBUTES:
            _LOGGER.debug("ignoring flag %r with unknown target %r", spelling, attribute)
            continue
        flags[spelling] = (attribute, value)
    return flags


@dataclass(slots=True)
class ParserConfig:
    """Tables that drive token classification."""

    flags: Dict[str, Tuple[str, bool]] = field(default_factory=lambda: dict(DEFAULT_FLAGS))
    output_keys: tuple[str, ...] = DEFAULT_OUTPUT_KEYS
    log_level: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        if not isinstance(data, dict):
            data = {}
        flags = _parse_flags(data.get("flags"))
        output_raw = data.get("output_keys")
        if isinstance(output_raw, list):
            output_keys = tuple(
                str(item).strip().lstrip("-") for item in output_raw if str(item).strip().lstrip("-")
            ) or DEFAULT_OUTPUT_KEYS
        else:
            output_keys = DEFAULT_OUTPUT_KEYS
        level_raw = data.get("log_level")
        log_level = str(level_raw).strip().upper() if level_raw else None
        return cls(flags=flags, output_keys=output_keys, log_level=log_level or None)


def _candidate_paths(explicit: Optional[Path]) -> Iterable[Path]:
    if explicit is not None:
        yield explicit
    env_path = os.getenv(_CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()
    yield from _DEFAULT_CONFIG_LOCATIONS


def _load_config(path: Optional[Path] = None) -> ParserConfig:
    config = ParserConfig()
    for candidate in _candidate_paths(path):
        try:
            if candidate.exists():
                data = json.loads(candidate.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    config = ParserConfig.from_dict(data)
                    break
        except (OSError, ValueError) as exc:
            _LOGGER.debug("skipping unreadable config %s: %s", candidate, exc)
            continue
    env_level = os.getenv(_LOG_LEVEL_ENV)
    if env_level:
        config.log_level = env_level.strip().upper()
    return config


@lru_cache(maxsize=1)
def get_runtime_config() -> ParserConfig:
    """Return the cached runtime configuration."""

    return _load_config(None)


def reload_config(path: Optional[Path] = None) -> ParserConfig:
    """Reload configuration from disk, bypassing the cache."""

    get_runtime_config.cache_clear()  # type: ignore[attr-defined]
    return get_runtime_config() if path is None else _load_config(path)
