# src/core/patch_assembler.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from src.core.annotation import ChangeCounts, create_patch_mark, print_annotation
from src.core.diff_options import DiffOptions
from src.core.line_normalizer import DiffLines
from src.core.range_formatter import format_common, format_delete, format_insert
from src.core.subsequence import Oracle, find_common_subsequences
from src.utils.logger import get_logger

logger = get_logger(__name__)


class _Assembler(ABC):
    """
    Shared state for one diff: the line sequences, the output buffer and
    the change counts. The oracle calls found_subsequence() once per common
    run; finish() handles whatever follows the last run.
    """

    def __init__(self, lines: DiffLines, options: DiffOptions):
        self.lines = lines
        self.options = options
        self.a_length = len(lines.a_lines_un)
        self.b_length = len(lines.b_lines_un)
        self.change_counts = ChangeCounts()
        self.output: List[str] = []

    def put(self, line: str) -> None:
        self.output.append(line)

    def is_common(self, a_index: int, b_index: int) -> bool:
        return self.lines.a_lines_un[a_index] == self.lines.b_lines_un[b_index]

    @abstractmethod
    def found_subsequence(self, n_common: int, a_common: int, b_common: int) -> None:
        ...

    @abstractmethod
    def finish(self) -> None:
        ...

    def run(self, oracle: Oracle = find_common_subsequences) -> "_Assembler":
        oracle(self.a_length, self.b_length, self.is_common, self.found_subsequence)
        self.finish()
        return self

    def render(self) -> str:
        return print_annotation(self.options, self.change_counts) + "\n".join(self.output)

    # ---------- formatting helpers ----------

    def _changes(self, a_start: int, a_end: int, b_start: int, b_end: int) -> None:
        lines = self.lines
        self.change_counts.a += a_end - a_start
        self.change_counts.b += b_end - b_start
        format_delete(a_start, a_end, lines.a_lines_un, lines.a_lines_in, self.options, self.put)
        format_insert(b_start, b_end, lines.b_lines_un, lines.b_lines_in, self.options, self.put)

    def _common(self, n_common: int, a_common: int, b_common: int) -> None:
        lines = self.lines
        format_common(
            n_common, a_common, b_common,
            lines.a_lines_in, lines.b_lines_un, lines.b_lines_in,
            self.options, self.put,
        )


class ExpandedAssembler(_Assembler):
    """Every line of both sides, changes interleaved with common runs."""

    def __init__(self, lines: DiffLines, options: DiffOptions):
        super().__init__(lines, options)
        self.a_start = 0
        self.b_start = 0

    def found_subsequence(self, n_common: int, a_common: int, b_common: int) -> None:
        self._changes(self.a_start, a_common, self.b_start, b_common)
        self._common(n_common, a_common, b_common)
        self.a_start = a_common + n_common
        self.b_start = b_common + n_common

    def finish(self) -> None:
        # After the last common run, format remaining change lines.
        self._changes(self.a_start, self.a_length, self.b_start, self.b_length)
        self.a_start = self.a_length
        self.b_start = self.b_length


class WindowedAssembler(_Assembler):
    """
    Change lines plus at most `context_lines` common lines around them.

    Output is grouped into patches [a_start, a_end) x [b_start, b_end). Each
    patch reserves a placeholder slot that becomes its patch mark once the
    patch is closed. If the single patch covers both sides completely, the
    placeholder is dropped and the result matches the expanded output.
    """

    def __init__(self, lines: DiffLines, options: DiffOptions):
        super().__init__(lines, options)
        self.n_context = options.context_lines
        self.i_patch_mark = 0
        self.output.append("")  # placeholder for the first patch mark
        self.is_at_end = False
        # The first patch starts at 0 even with no common run at the start.
        self.a_start = 0
        self.a_end = 0
        self.b_start = 0
        self.b_end = 0

    def found_subsequence(self, n_common: int, a_start_common: int, b_start_common: int) -> None:
        a_end_common = a_start_common + n_common
        b_end_common = b_start_common + n_common
        self.is_at_end = a_end_common == self.a_length and b_end_common == self.b_length

        if a_start_common == 0 and b_start_common == 0:
            # Common run at start: only its tail is leading context.
            self._open_patch(n_common, a_end_common, b_end_common)
            return

        self._changes(self.a_end, a_start_common, self.b_end, b_start_common)
        self.a_end = a_start_common
        self.b_end = b_start_common

        # At end, context only follows the preceding changes; otherwise it
        # also precedes the following ones.
        max_context = self.n_context if self.is_at_end else self.n_context * 2

        if n_common <= max_context:
            self._common(n_common, self.a_end, self.b_end)
            self.a_end += n_common
            self.b_end += n_common
            return

        # The patch ends: context is less than the number of common lines.
        self._common(self.n_context, self.a_end, self.b_end)
        self.a_end += self.n_context
        self.b_end += self.n_context
        self._close_patch()

        if not self.is_at_end:
            self.i_patch_mark = len(self.output)
            self.output.append("")
            self._open_patch(n_common, a_end_common, b_end_common)

    def finish(self) -> None:
        if not self.is_at_end:
            # No common run at all, or the last one did not reach the end.
            self._changes(self.a_end, self.a_length, self.b_end, self.b_length)
            self.a_end = self.a_length
            self.b_end = self.b_length

        if (
            self.a_start == 0 and self.a_end == self.a_length
            and self.b_start == 0 and self.b_end == self.b_length
        ):
            del self.output[self.i_patch_mark]
        else:
            self._close_patch()

    def _open_patch(self, n_common: int, a_end_common: int, b_end_common: int) -> None:
        n_lines = min(self.n_context, n_common)
        self.a_start = a_end_common - n_lines
        self.b_start = b_end_common - n_lines
        self._common(n_lines, self.a_start, self.b_start)
        self.a_end = a_end_common
        self.b_end = b_end_common

    def _close_patch(self) -> None:
        logger.debug(
            "Patch a[%d:%d] b[%d:%d]", self.a_start, self.a_end, self.b_start, self.b_end
        )
        self.output[self.i_patch_mark] = create_patch_mark(
            self.a_start, self.a_end, self.b_start, self.b_end, self.options
        )


class ChangeCounter(_Assembler):
    """Counts removed / added lines between common runs; formats nothing."""

    def __init__(self, lines: DiffLines, options: DiffOptions):
        super().__init__(lines, options)
        self.a_start = 0
        self.b_start = 0

    def found_subsequence(self, n_common: int, a_common: int, b_common: int) -> None:
        self.change_counts.a += a_common - self.a_start
        self.change_counts.b += b_common - self.b_start
        self.a_start = a_common + n_common
        self.b_start = b_common + n_common

    def finish(self) -> None:
        self.found_subsequence(0, self.a_length, self.b_length)
