"""Expose the project root on sys.path and share fixtures for pytest runs."""

from __future__ import annotations

import logging
import sys

from pathlib import Path
from typing import Callable

import pytest

from zinc.configuration import ZincSettings, build_settings

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _reset_zinc_logger():
    yield
    logger = logging.getLogger("zinc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def write_script(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a ZINC script under ``tmp_path``."""

    def _write(text: str, name: str = "main.zn") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def make_settings(tmp_path: Path) -> Callable[..., ZincSettings]:
    """Return a helper building settings rooted at ``tmp_path``."""

    def _make(source: str | Path = "main.zn", **kwargs) -> ZincSettings:
        config = kwargs.pop("config", {})
        return build_settings(
            config, source=source, cwd=tmp_path, environ={}, **kwargs
        )

    return _make
