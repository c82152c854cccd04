# src/core/diff_lines.py
from __future__ import annotations

from typing import Optional, Tuple

from src.config import NO_DIFF_MESSAGE
from src.core.annotation import ChangeCounts
from src.core.diff_options import DiffOptions, plain_options
from src.core.line_normalizer import resolve_lines
from src.core.patch_assembler import ChangeCounter, ExpandedAssembler, WindowedAssembler
from src.core.subsequence import Oracle, find_common_subsequences
from src.utils.logger import get_logger

logger = get_logger(__name__)


def render_diff(
    a: str,
    b: str,
    options: DiffOptions,
    original: Optional[Tuple[str, str]] = None,
    *,
    oracle: Oracle = find_common_subsequences,
) -> str:
    """
    Annotated line diff of expected `a` and received `b`.

    `original` is an optional (a, b) pair of the same texts with indentation:
    lines of `a`/`b` are compared, lines of `original` are displayed.
    Returns NO_DIFF_MESSAGE when the texts are identical.
    """
    if a == b:
        return NO_DIFF_MESSAGE

    lines = resolve_lines(a, b, original)
    assembler_cls = ExpandedAssembler if options.expand else WindowedAssembler
    assembler = assembler_cls(lines, options).run(oracle)

    logger.debug(
        "Diffed %d vs %d lines (%s): %d removed, %d added",
        assembler.a_length, assembler.b_length,
        "expand" if options.expand else f"context {options.context_lines}",
        assembler.change_counts.a, assembler.change_counts.b,
    )
    return assembler.render()


def diff_lines_counts(
    a: str,
    b: str,
    original: Optional[Tuple[str, str]] = None,
    *,
    oracle: Oracle = find_common_subsequences,
) -> ChangeCounts:
    """Only the number of removed / added lines."""
    if a == b:
        return ChangeCounts()
    lines = resolve_lines(a, b, original)
    return ChangeCounter(lines, plain_options()).run(oracle).change_counts
