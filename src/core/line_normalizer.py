# src/core/line_normalizer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class DiffLines:
    """
    Line sequences for one diff.

    *_un lines are compared; *_in lines keep the original indentation and
    are only used for display. When indentation is unknown the two are the
    same list object.
    """
    a_lines_un: List[str]
    b_lines_un: List[str]
    a_lines_in: List[str]
    b_lines_in: List[str]

    @property
    def a_has_indentation(self) -> bool:
        return self.a_lines_un is not self.a_lines_in

    @property
    def b_has_indentation(self) -> bool:
        return self.b_lines_un is not self.b_lines_in


def split_lines(text: str) -> List[str]:
    # Only "\n" separates lines; a trailing newline leaves an empty last line.
    return text.split("\n")


def unindent(text: str) -> str:
    """Strip leading whitespace from every line (comparison basis that ignores indentation)."""
    return "\n".join(line.lstrip() for line in split_lines(text))


def resolve_lines(a: str, b: str, original: Optional[Tuple[str, str]] = None) -> DiffLines:
    a_lines_un = split_lines(a)
    b_lines_un = split_lines(b)

    if original is None:
        return DiffLines(a_lines_un, b_lines_un, a_lines_un, b_lines_un)

    a_lines_in = split_lines(original[0])
    b_lines_in = split_lines(original[1])

    if len(a_lines_un) != len(a_lines_in) or len(b_lines_un) != len(b_lines_in):
        logger.debug(
            "Indented lines (%d, %d) do not line up with compared lines (%d, %d); comparing indented lines",
            len(a_lines_in), len(b_lines_in), len(a_lines_un), len(b_lines_un),
        )
        a_lines_un = a_lines_in
        b_lines_un = b_lines_in

    return DiffLines(a_lines_un, b_lines_un, a_lines_in, b_lines_in)
