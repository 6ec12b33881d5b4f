"""Toolchain runner exports."""

from .base import BuildResult, BuildRunner
from .native import NativeToolchainRunner

__all__ = [
    "BuildResult",
    "BuildRunner",
    "NativeToolchainRunner",
]
