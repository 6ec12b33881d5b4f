"""Translate, build, run and clean up a single ZINC script."""

from __future__ import annotations

import logging
import sys

from pathlib import Path
from typing import Iterable, Optional

from zinc.configuration import ZincSettings
from zinc.toolchain import BuildResult, BuildRunner, NativeToolchainRunner
from zinc.translator import Translator

LOGGER = logging.getLogger(__name__)

COMPILE_FAILED_MESSAGE = (
    "| Compilation failed. Please check the code for errors."
)
RUN_FAILED_MESSAGE = "| Failed to run the program."


def serialize_translation(lines: Iterable[str]) -> str:
    """Join translated lines, terminating each one with a newline."""

    return "".join(f"{line}\n" for line in lines)


class BuildOrchestrator:
    """High level controller for the translate/build/run workflow."""

    def __init__(
        self,
        settings: ZincSettings,
        *,
        runner: Optional[BuildRunner] = None,
        translator: Optional[Translator] = None,
    ) -> None:
        self.settings = settings
        self.runner = runner or NativeToolchainRunner.from_settings(settings)
        self.translator = translator or Translator(settings)

    def run_file(self, path: Optional[Path] = None) -> BuildResult:
        lines = self.translator.translate_file(
            path or self.settings.input_path
        )
        return self.build(lines)

    def build(self, lines: Iterable[str]) -> BuildResult:
        result = self.runner.run(serialize_translation(lines))
        if not result.compiled:
            print(COMPILE_FAILED_MESSAGE, file=sys.stderr)
            if result.diagnostics:
                sys.stderr.write(result.diagnostics)
            return result

        if not result.ran:
            print(RUN_FAILED_MESSAGE, file=sys.stderr)
            if result.diagnostics:
                sys.stderr.write(result.diagnostics)
        elif result.returncode:
            LOGGER.info("Program exited with status %d", result.returncode)
        if self.settings.keep_translation:
            LOGGER.info(
                "Kept c++ translation at %s", self.settings.translation_path
            )
        else:
            self.settings.translation_path.unlink(missing_ok=True)
        return result


__all__ = ["BuildOrchestrator", "serialize_translation"]
