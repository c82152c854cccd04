# src/core/range_formatter.py
from __future__ import annotations

from typing import Callable, List

from src.core.diff_options import DiffOptions
from src.core.highlight import get_highlight_spaces

Put = Callable[[str], None]


def _indentation(line_in: str, line_un: str) -> str:
    # Whatever the indented line has beyond the compared line.
    return line_in[: len(line_in) - len(line_un)]


def format_delete(
    a_start: int,
    a_end: int,
    a_lines_un: List[str],
    a_lines_in: List[str],
    options: DiffOptions,
    put: Put,
) -> None:
    """Put one formatted delete line per index of [a_start, a_end) in expected lines."""
    highlight_spaces = get_highlight_spaces(a_lines_un is not a_lines_in)
    for a_index in range(a_start, a_end):
        a_line_un = a_lines_un[a_index]
        indentation = _indentation(a_lines_in[a_index], a_line_un)
        put(
            options.a_color(
                options.a_indicator + " " + indentation
                + highlight_spaces(a_line_un, options.change_color)
            )
        )


def format_insert(
    b_start: int,
    b_end: int,
    b_lines_un: List[str],
    b_lines_in: List[str],
    options: DiffOptions,
    put: Put,
) -> None:
    """Put one formatted insert line per index of [b_start, b_end) in received lines."""
    highlight_spaces = get_highlight_spaces(b_lines_un is not b_lines_in)
    for b_index in range(b_start, b_end):
        b_line_un = b_lines_un[b_index]
        indentation = _indentation(b_lines_in[b_index], b_line_un)
        put(
            options.b_color(
                options.b_indicator + " " + indentation
                + highlight_spaces(b_line_un, options.change_color)
            )
        )


def format_common(
    n_common: int,
    a_common: int,
    b_common: int,
    a_lines_in: List[str],
    b_lines_un: List[str],
    b_lines_in: List[str],
    options: DiffOptions,
    put: Put,
) -> None:
    """
    Put n_common formatted common lines starting at (a_common, b_common).

    a_lines_un is not needed: within a common run it equals b_lines_un.
    Indentation is taken from the received side. A common line whose
    indented lengths differ is drawn with indent_color and inverse edges.
    """
    highlight_spaces = get_highlight_spaces(b_lines_un is not b_lines_in)
    for offset in range(n_common):
        a_index = a_common + offset
        b_index = b_common + offset
        b_line_un = b_lines_un[b_index]
        b_line_in = b_lines_in[b_index]

        same_indentation = len(a_lines_in[a_index]) == len(b_line_in)
        fg = options.common_color if same_indentation else options.indent_color
        bg = options.common_bg_color if same_indentation else options.change_color

        put(
            fg(
                options.common_indicator + " " + _indentation(b_line_in, b_line_un)
                + highlight_spaces(b_line_un, bg)
            )
        )
