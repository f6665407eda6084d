"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _cmdargs_env_defaults(monkeypatch, tmp_path):
    """Isolate tests from local config files and colour settings."""

    for name in ("CMDARGS_CONFIG", "CMDARGS_LOG_LEVEL", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.chdir(tmp_path)

    from cmdargs.config import get_runtime_config

    get_runtime_config.cache_clear()
    yield
    get_runtime_config.cache_clear()
