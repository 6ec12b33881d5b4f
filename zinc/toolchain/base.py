"""Build-and-run interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class BuildResult:
    compiled: bool
    ran: bool = False
    returncode: Optional[int] = None
    diagnostics: str = ""


class BuildRunner(Protocol):
    def run(self, source_text: str) -> BuildResult:
        """Compile ``source_text`` and, if that succeeds, run the program."""
        ...
