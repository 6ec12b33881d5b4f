"""Single-line rewrite rules that turn ZINC constructs into C++.

Every rule is a pure ``str -> str`` function. Rules only look at the first
occurrence of their keyword on a line and never track nesting, strings or
comments, so a keyword sitting at a valid boundary inside a string literal
is rewritten like any other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from zinc.constants import BOUNDARY_CHARS

RewriteRule = Callable[[str], str]

FUNCTION_TOKEN = "fn"
FUNCTION_KEYWORD = "void "
ENTRY_POINT_TOKEN = "main()"
ENTRY_POINT_RETURN_TYPE = "int "
STRING_TOKEN = "string"
STRING_TYPE = "std::string"
LOOP_TOKEN = "loop("
LIST_TOKEN = "list "
LIST_DELIMITER = ", "


def is_token_boundary(line: str, pos: int) -> bool:
    """Return True if ``pos`` is the line start or follows a boundary char."""

    return pos == 0 or line[pos - 1] in BOUNDARY_CHARS


def find_construct(line: str, token: str) -> Optional[int]:
    """Return the index of the first ``token`` if it sits on a boundary.

    A later occurrence is never considered, even when the first one is
    embedded in an identifier and the later one is well placed.
    """

    pos = line.find(token)
    if pos == -1 or not is_token_boundary(line, pos):
        return None
    return pos


def rewrite_function_declaration(line: str) -> str:
    """``fn name()`` -> ``void  name()``."""

    pos = find_construct(line, FUNCTION_TOKEN)
    if pos is None:
        return line
    return line[:pos] + FUNCTION_KEYWORD + line[pos + len(FUNCTION_TOKEN):]


def rewrite_entry_point(line: str) -> str:
    """Prefix ``main()`` with its integer return type."""

    pos = find_construct(line, ENTRY_POINT_TOKEN)
    if pos is None:
        return line
    return line[:pos] + ENTRY_POINT_RETURN_TYPE + line[pos:]


def rewrite_string_alias(line: str) -> str:
    pos = find_construct(line, STRING_TOKEN)
    if pos is None:
        return line
    return line[:pos] + STRING_TYPE + line[pos + len(STRING_TOKEN):]


def format_counting_loop(variable: str, bound: str) -> str:
    return (
        f"for(int {variable} = 0; {variable} < {bound}; {variable}++)"
    )


def rewrite_loop(line: str) -> str:
    """``loop(bound, var)`` -> a C-style counting ``for`` header.

    Without a comma the line is left untouched. Without a closing
    parenthesis the loop variable runs to the end of the line; the header
    then replaces the rest of the line, or is inserted ahead of it when
    ``loop`` starts the line.
    """

    pos = find_construct(line, LOOP_TOKEN)
    if pos is None:
        return line
    open_paren = line.find("(", pos)
    comma = line.find(",", open_paren)
    if comma == -1:
        return line
    bound = line[open_paren + 1:comma]
    close_paren = line.find(")", comma)
    if close_paren == -1:
        variable = line[comma + 1:]
        rest = line if pos == 0 else ""
    else:
        variable = line[comma + 1:close_paren]
        rest = line[close_paren + 1:]
    return line[:pos] + format_counting_loop(variable, bound) + rest


@dataclass(frozen=True)
class ListLiteral:
    """A ``list name[a, b, c]`` literal parsed from a single line."""

    name: str
    elements: Tuple[str, ...]

    @classmethod
    def parse(cls, line: str) -> Optional["ListLiteral"]:
        pos = line.find(LIST_TOKEN)
        if pos == -1:
            return None
        name_start = pos + len(LIST_TOKEN)
        name_end = line.find("[", name_start)
        if name_end == -1:
            return None
        # Contents are taken from the first bracket pair on the line.
        open_bracket = line.find("[")
        close_bracket = line.find("]", open_bracket)
        if close_bracket == -1:
            return None
        contents = line[open_bracket + 1:close_bracket]
        return cls(
            name=line[name_start:name_end],
            elements=tuple(contents.split(LIST_DELIMITER)),
        )

    def to_declaration(self) -> str:
        joined = LIST_DELIMITER.join(self.elements)
        return (
            f"{STRING_TYPE} {self.name}[{len(self.elements)}] = {{{joined}}};"
        )


def rewrite_list(line: str) -> str:
    """Replace the whole line with a fixed-size string array declaration."""

    literal = ListLiteral.parse(line)
    if literal is None:
        return line
    return literal.to_declaration()


DEFAULT_RULES: Tuple[RewriteRule, ...] = (
    rewrite_function_declaration,
    rewrite_entry_point,
    rewrite_string_alias,
    rewrite_loop,
    rewrite_list,
)


def apply_rules(
    line: str, rules: Iterable[RewriteRule] = DEFAULT_RULES
) -> str:
    """Run ``rules`` in order, each one on the previous rule's output."""

    for rule in rules:
        line = rule(line)
    return line


__all__ = [
    "DEFAULT_RULES",
    "ListLiteral",
    "RewriteRule",
    "apply_rules",
    "find_construct",
    "format_counting_loop",
    "is_token_boundary",
    "rewrite_entry_point",
    "rewrite_function_declaration",
    "rewrite_list",
    "rewrite_loop",
    "rewrite_string_alias",
]
