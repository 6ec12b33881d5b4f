"""Line-by-line translation of ZINC scripts into C++ source."""

from __future__ import annotations

import logging

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from zinc.constants import IMPORT_MARKER, SOURCE_ENCODING, SOURCE_ERRORS
from zinc.exceptions import InputNotFoundError, InvalidSourceError
from zinc.translator.rules import DEFAULT_RULES, RewriteRule, apply_rules
from zinc.translator.stdlib import StdlibRenderer

if TYPE_CHECKING:  # pragma: no cover
    from zinc.configuration import ZincSettings

LOGGER = logging.getLogger(__name__)


@dataclass
class TranslationState:
    import_recognized: bool = False


class Translator:
    """Applies the import gate and the rewrite rules to every line.

    The first line must be the import marker; it is replaced in place by the
    rendered stdlib shim. Any line seen before the marker aborts the pass
    with :class:`InvalidSourceError`.
    """

    def __init__(
        self,
        settings: Optional["ZincSettings"] = None,
        *,
        rules: Sequence[RewriteRule] = DEFAULT_RULES,
        stdlib: Optional[StdlibRenderer] = None,
        import_marker: str = IMPORT_MARKER,
    ) -> None:
        if stdlib is None:
            extra_dirs = settings.stdlib_template_dirs if settings else ()
            stdlib = StdlibRenderer(extra_dirs=extra_dirs)
        self.rules = tuple(rules)
        self.stdlib = stdlib
        self.import_marker = import_marker
        self.state = TranslationState()
        self._preamble: Optional[str] = None

    @property
    def preamble(self) -> str:
        if self._preamble is None:
            self._preamble = self.stdlib.render()
        return self._preamble

    def translate_line(self, line: str, line_number: int = 1) -> str:
        if line == self.import_marker and not self.state.import_recognized:
            self.state.import_recognized = True
            line = self.preamble
        elif not self.state.import_recognized:
            raise InvalidSourceError(line_number, line)
        return apply_rules(line, self.rules)

    def translate(self, lines: Iterable[str]) -> List[str]:
        """Translate ``lines`` in order, one output entry per input line."""

        self.state = TranslationState()
        return [
            self.translate_line(line, number)
            for number, line in enumerate(lines, start=1)
        ]

    def translate_file(self, path: Path) -> List[str]:
        # Undecodable bytes survive as surrogates and are written back as is.
        try:
            handle = Path(path).open(
                "r",
                encoding=SOURCE_ENCODING,
                errors=SOURCE_ERRORS,
                newline="\n",
            )
        except OSError as exc:
            raise InputNotFoundError(
                f"Error: File '{path}' does not exist."
            ) from exc
        with handle:
            translated = self.translate(
                line.rstrip("\r\n") for line in handle
            )
        LOGGER.info("Translated %d line(s) from %s", len(translated), path)
        return translated


def split_source_lines(source: str) -> List[str]:
    """Split on ``\\n`` only; a final newline does not open another line."""

    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def translate_source(source: str) -> List[str]:
    """Translate an in-memory script with the default rules and shim."""

    return Translator().translate(split_source_lines(source))


__all__ = [
    "TranslationState",
    "Translator",
    "split_source_lines",
    "translate_source",
]
