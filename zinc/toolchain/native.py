"""Runner that shells out to the system C++ compiler."""

from __future__ import annotations

import logging
import subprocess

from pathlib import Path
from typing import List

from zinc.configuration import ToolchainSettings, ZincSettings
from zinc.constants import SOURCE_ENCODING, SOURCE_ERRORS
from zinc.exceptions import OutputUnwritableError

from .base import BuildResult, BuildRunner

LOGGER = logging.getLogger(__name__)


class NativeToolchainRunner(BuildRunner):
    """Writes the translation to disk, compiles it and runs the binary.

    Both subprocesses block without a timeout. The program inherits the
    caller's stdin/stdout/stderr so interactive scripts keep working.
    """

    def __init__(
        self,
        translation_path: Path,
        binary_path: Path,
        toolchain: ToolchainSettings | None = None,
    ) -> None:
        self.translation_path = translation_path
        self.binary_path = binary_path
        self.toolchain = toolchain or ToolchainSettings()

    @classmethod
    def from_settings(cls, settings: ZincSettings) -> "NativeToolchainRunner":
        return cls(
            settings.translation_path,
            settings.binary_path,
            settings.toolchain,
        )

    def compile_command(self) -> List[str]:
        return [
            *self.toolchain.compiler,
            *self.toolchain.flags,
            "-o",
            str(self.binary_path),
            str(self.translation_path),
        ]

    def run(self, source_text: str) -> BuildResult:
        self._write_translation(source_text)

        command = self.compile_command()
        LOGGER.debug("Compiling with: %s", " ".join(command))
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            return BuildResult(compiled=False, diagnostics=f"{exc}\n")
        diagnostics = (proc.stdout or "") + (proc.stderr or "")
        if proc.returncode != 0:
            return BuildResult(compiled=False, diagnostics=diagnostics)

        LOGGER.info("Compilation successful.")
        LOGGER.info("Running the program...")
        try:
            completed = subprocess.run([str(self.binary_path)], check=False)
        except OSError as exc:
            return BuildResult(
                compiled=True,
                ran=False,
                diagnostics=diagnostics + f"{exc}\n",
            )
        return BuildResult(
            compiled=True,
            ran=True,
            returncode=completed.returncode,
            diagnostics=diagnostics,
        )

    def _write_translation(self, source_text: str) -> None:
        try:
            self.translation_path.parent.mkdir(parents=True, exist_ok=True)
            with self.translation_path.open(
                "w", encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS
            ) as handle:
                handle.write(source_text)
        except OSError as exc:
            raise OutputUnwritableError(
                "Error: Unable to create output file."
            ) from exc
        LOGGER.info("Wrote translation to %s", self.translation_path)


__all__ = ["NativeToolchainRunner"]
