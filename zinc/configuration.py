"""Typed helpers for building ZINC run settings from config dictionaries."""

from __future__ import annotations

import os
import shlex

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from zinc.constants import (
    DEFAULT_BINARY_FILE,
    DEFAULT_COMPILER,
    DEFAULT_TRANSLATION_FILE,
)
from zinc.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent / "configs" / "default_config.yaml"

ENV_COMPILER = "ZINC_CXX"
ENV_COMPILER_FLAGS = "ZINC_CXXFLAGS"


def _ensure_path(value: Optional[str | Path], *, base: Path) -> Path:
    path = Path(value) if value else base
    if not path.is_absolute():
        path = base / path
    return path


def _coerce_command(value: Any, default: Tuple[str, ...]) -> Tuple[str, ...]:
    if value is None or value == "" or value == []:
        return default
    if isinstance(value, str):
        return tuple(shlex.split(value))
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class ToolchainSettings:
    compiler: Tuple[str, ...] = (DEFAULT_COMPILER,)
    flags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LoggingSettings:
    file: Optional[Path] = None
    color: bool = True


@dataclass(frozen=True)
class ZincSettings:
    """Everything a single translate/build/run pass needs, fixed up front."""

    input_path: Path
    translation_path: Path
    binary_path: Path
    keep_translation: bool = False
    verbose: bool = False
    toolchain: ToolchainSettings = field(default_factory=ToolchainSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    stdlib_template_dirs: Tuple[Path, ...] = field(default_factory=tuple)


def load_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise ConfigError(f"Config file '{config_path}' not found.")
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Config file '{config_path}' is not valid YAML: {exc}"
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file '{config_path}' must contain a mapping."
        )
    return data


def resolve_input_path(raw: str | Path, *, cwd: Optional[Path] = None) -> Path:
    """Resolve the script path the way the command line accepts it.

    A leading ``./`` is dropped and relative paths are joined onto ``cwd``.
    """

    text = str(raw)
    if text.startswith("./"):
        text = text[2:]
    path = Path(text).expanduser()
    if not path.is_absolute():
        path = (cwd or Path.cwd()) / path
    return path


def build_settings(
    config: Mapping[str, Any],
    *,
    source: str | Path,
    keep_translation: bool = False,
    verbose: bool = False,
    color: Optional[bool] = None,
    cwd: Optional[Path] = None,
    config_root: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ZincSettings:
    cwd = cwd or Path.cwd()
    config_root = config_root or cwd
    env = os.environ if environ is None else environ

    toolchain_cfg = dict(config.get("toolchain") or {})
    compiler = _coerce_command(
        env.get(ENV_COMPILER) or toolchain_cfg.get("compiler"),
        (DEFAULT_COMPILER,),
    )
    env_flags = env.get(ENV_COMPILER_FLAGS)
    if env_flags is not None:
        flags = tuple(shlex.split(env_flags))
    else:
        flags = _coerce_command(toolchain_cfg.get("flags"), ())
    toolchain = ToolchainSettings(compiler=compiler, flags=flags)

    build_cfg = dict(config.get("build") or {})
    workdir = _ensure_path(build_cfg.get("workdir"), base=cwd)
    translation_path = _ensure_path(
        build_cfg.get("translation_file") or DEFAULT_TRANSLATION_FILE,
        base=workdir,
    )
    binary_path = _ensure_path(
        build_cfg.get("binary_file") or DEFAULT_BINARY_FILE,
        base=workdir,
    )

    logging_cfg = dict(config.get("logging") or {})
    log_file = logging_cfg.get("file")
    logging_settings = LoggingSettings(
        file=_ensure_path(log_file, base=config_root) if log_file else None,
        color=bool(logging_cfg.get("color", True)) if color is None else color,
    )

    stdlib_cfg = dict(config.get("stdlib") or {})
    template_dirs = stdlib_cfg.get("template_dirs") or []
    if isinstance(template_dirs, (str, Path)):
        template_dirs = [template_dirs]

    return ZincSettings(
        input_path=resolve_input_path(source, cwd=cwd),
        translation_path=translation_path,
        binary_path=binary_path,
        keep_translation=keep_translation,
        verbose=verbose,
        toolchain=toolchain,
        logging=logging_settings,
        stdlib_template_dirs=tuple(
            _ensure_path(item, base=config_root) for item in template_dirs
        ),
    )


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "LoggingSettings",
    "ToolchainSettings",
    "ZincSettings",
    "build_settings",
    "load_config",
    "resolve_input_path",
]
