"""ZINC to C++ translation core."""

from .engine import (
    TranslationState,
    Translator,
    split_source_lines,
    translate_source,
)
from .rules import DEFAULT_RULES, ListLiteral, RewriteRule, apply_rules
from .stdlib import StdlibRenderer, render_stdlib

__all__ = [
    "DEFAULT_RULES",
    "ListLiteral",
    "RewriteRule",
    "StdlibRenderer",
    "TranslationState",
    "Translator",
    "apply_rules",
    "render_stdlib",
    "split_source_lines",
    "translate_source",
]
