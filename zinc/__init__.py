"""ZINC to C++ translator package entry point."""

from .configuration import ZincSettings, build_settings
from .constants import IMPORT_MARKER, VERSION
from .exceptions import (
    ConfigError,
    InputNotFoundError,
    InvalidSourceError,
    OutputUnwritableError,
    ZincError,
)
from .orchestrator import BuildOrchestrator
from .toolchain import BuildResult, BuildRunner
from .translator import Translator, translate_source

__version__ = VERSION

__all__ = [
    "BuildOrchestrator",
    "BuildResult",
    "BuildRunner",
    "ConfigError",
    "IMPORT_MARKER",
    "InputNotFoundError",
    "InvalidSourceError",
    "OutputUnwritableError",
    "Translator",
    "ZincError",
    "ZincSettings",
    "build_settings",
    "translate_source",
]
