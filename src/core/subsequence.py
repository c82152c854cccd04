"""subsequence.py
=================================
Longest-common-subsequence oracle for the line diff.

```
find_common_subsequences(a_length, b_length, is_common, found_subsequence)
```

Items are never touched directly: the caller supplies ``is_common(a_index,
b_index)``, so any notion of equality works (the diff compares lines without
indentation, for example). For every maximal common run the oracle calls
``found_subsequence(n_common, a_common, b_common)``, left to right, with runs
strictly increasing and non-overlapping in both index spaces.

The search is the linear-space variant of Eugene W. Myers' O(ND) shortest
edit script ("An O(ND) Difference Algorithm and Its Variations", 1986):

1.  The common prefix and suffix of a region are trimmed first, which is
    the whole job for the typical near-identical assertion failure.

2.  What is left is bisected: the search runs forward from the top-left
    and backward from the bottom-right corner at the same time until the
    two frontiers overlap. The overlap lies on a shortest edit path, so
    the region splits there and each half is solved the same way. Only
    two frontier arrays of O(N + M) are alive per level.

3.  Each bisection gives up after ``max_edits`` rounds from either end.
    The region is then reported as having nothing in common, which keeps
    two large unrelated texts from costing O((N + M)^2) predicate calls.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from src.config import SUBSEQUENCE_MAX_EDITS
from src.utils.logger import get_logger

logger = get_logger(__name__)

IsCommon = Callable[[int, int], bool]
FoundSubsequence = Callable[[int, int, int], None]
Oracle = Callable[[int, int, IsCommon, FoundSubsequence], None]

Run = Tuple[int, int, int]  # (n_common, a_common, b_common)


def find_common_subsequences(
    a_length: int,
    b_length: int,
    is_common: IsCommon,
    found_subsequence: FoundSubsequence,
    max_edits: int = SUBSEQUENCE_MAX_EDITS,
) -> None:
    """Report each maximal common run of [0, a_length) x [0, b_length)."""
    runs: List[Run] = []
    _collect(0, a_length, 0, b_length, is_common, max_edits, runs)

    logger.debug("Common runs: %d for %d x %d lines", len(runs), a_length, b_length)
    for n_common, a_common, b_common in runs:
        found_subsequence(n_common, a_common, b_common)


def _add_run(runs: List[Run], n_common: int, a_common: int, b_common: int) -> None:
    # Halves of a bisection can meet in the middle of one run.
    if runs:
        n_last, a_last, b_last = runs[-1]
        if a_last + n_last == a_common and b_last + n_last == b_common:
            runs[-1] = (n_last + n_common, a_last, b_last)
            return
    runs.append((n_common, a_common, b_common))


def _collect(
    a_start: int,
    a_end: int,
    b_start: int,
    b_end: int,
    is_common: IsCommon,
    max_edits: int,
    runs: List[Run],
) -> None:
    n_prefix = 0
    while a_start + n_prefix < a_end and b_start + n_prefix < b_end and is_common(
        a_start + n_prefix, b_start + n_prefix
    ):
        n_prefix += 1
    if n_prefix:
        _add_run(runs, n_prefix, a_start, b_start)
    a_start += n_prefix
    b_start += n_prefix

    n_suffix = 0
    while a_start < a_end - n_suffix and b_start < b_end - n_suffix and is_common(
        a_end - 1 - n_suffix, b_end - 1 - n_suffix
    ):
        n_suffix += 1
    a_end -= n_suffix
    b_end -= n_suffix

    if a_start < a_end and b_start < b_end:
        split = _bisect(a_start, a_end, b_start, b_end, is_common, max_edits)
        if split in ((a_start, b_start), (a_end, b_end)):
            split = None  # a corner split would not shrink the region
        if split is None:
            logger.debug(
                "No overlap within %d edits for a[%d:%d] b[%d:%d]",
                max_edits, a_start, a_end, b_start, b_end,
            )
        else:
            a_split, b_split = split
            _collect(a_start, a_split, b_start, b_split, is_common, max_edits, runs)
            _collect(a_split, a_end, b_split, b_end, is_common, max_edits, runs)

    if n_suffix:
        _add_run(runs, n_suffix, a_end, b_end)


def _bisect(
    a_start: int,
    a_end: int,
    b_start: int,
    b_end: int,
    is_common: IsCommon,
    max_edits: int,
) -> Optional[Tuple[int, int]]:
    """
    Point where the forward and backward frontiers first overlap, or None.

    The region must have no common prefix or suffix and both sides must be
    non-empty. Coordinates inside are relative to (a_start, b_start); the
    backward frontier counts x from the far end of a.
    """
    n = a_end - a_start
    m = b_end - b_start
    max_d = min((n + m + 1) // 2, max_edits)
    v_offset = max_d
    v_length = 2 * max_d + 2
    forward = [-1] * v_length
    backward = [-1] * v_length
    forward[v_offset + 1] = 0
    backward[v_offset + 1] = 0
    delta = n - m
    # With an odd delta the frontiers can only meet while stepping forward.
    front = delta % 2 != 0

    # Diagonals that ran off the grid are skipped from then on.
    k1_start = k1_end = k2_start = k2_end = 0

    for d in range(max_d):
        for k1 in range(-d + k1_start, d + 1 - k1_end, 2):
            k1_offset = v_offset + k1
            if k1 == -d or (k1 != d and forward[k1_offset - 1] < forward[k1_offset + 1]):
                x1 = forward[k1_offset + 1]
            else:
                x1 = forward[k1_offset - 1] + 1
            y1 = x1 - k1
            while x1 < n and y1 < m and is_common(a_start + x1, b_start + y1):
                x1 += 1
                y1 += 1
            forward[k1_offset] = x1
            if x1 > n:
                k1_end += 2
            elif y1 > m:
                k1_start += 2
            elif front:
                k2_offset = v_offset + delta - k1
                if 0 <= k2_offset < v_length and backward[k2_offset] != -1:
                    if x1 >= n - backward[k2_offset]:
                        return a_start + x1, b_start + y1

        for k2 in range(-d + k2_start, d + 1 - k2_end, 2):
            k2_offset = v_offset + k2
            if k2 == -d or (k2 != d and backward[k2_offset - 1] < backward[k2_offset + 1]):
                x2 = backward[k2_offset + 1]
            else:
                x2 = backward[k2_offset - 1] + 1
            y2 = x2 - k2
            while x2 < n and y2 < m and is_common(a_end - 1 - x2, b_end - 1 - y2):
                x2 += 1
                y2 += 1
            backward[k2_offset] = x2
            if x2 > n:
                k2_end += 2
            elif y2 > m:
                k2_start += 2
            elif not front:
                k1_offset = v_offset + delta - k2
                if 0 <= k1_offset < v_length and forward[k1_offset] != -1:
                    x1 = forward[k1_offset]
                    y1 = x1 - (delta - k2)
                    if x1 >= n - x2:
                        return a_start + x1, b_start + y1

    return None
