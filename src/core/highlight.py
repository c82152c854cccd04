# src/core/highlight.py
from __future__ import annotations

import re
from typing import Callable

Decorate = Callable[[str], str]
Highlight = Callable[[str, Decorate], str]

_TRAILING = re.compile(r"\s+$")
# Odd run of leading whitespace: pairs, then the one left over before text.
_ODD_LEADING = re.compile(r"^((?:\s\s)*)(\s)(?=\S)")


def highlight_trailing_spaces(line: str, bg: Decorate) -> str:
    """Only trailing, when indentation is unknown (snapshot or multiline string)."""
    return _TRAILING.sub(lambda m: bg(m.group(0)), line, count=1)


def highlight_leading_trailing_spaces(line: str, bg: Decorate) -> str:
    """Both edges, when indentation is known.

    A line of only whitespace is covered by the trailing rule. With an odd
    number of leading spaces only the last one is highlighted, so 3 vs 4
    spaces stands out while consistent pairs stay plain.
    """
    line = highlight_trailing_spaces(line, bg)
    return _ODD_LEADING.sub(lambda m: m.group(1) + bg(m.group(2)), line, count=1)


def get_highlight_spaces(both_edges: bool) -> Highlight:
    return highlight_leading_trailing_spaces if both_edges else highlight_trailing_spaces
