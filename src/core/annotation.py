# src/core/annotation.py
from __future__ import annotations

from dataclasses import dataclass

from src.core.diff_options import DiffOptions


@dataclass
class ChangeCounts:
    a: int = 0  # deleted (expected-only) lines
    b: int = 0  # inserted (received-only) lines


def print_annotation(options: DiffOptions, change_counts: ChangeCounts) -> str:
    """Header lines naming each side, followed by a blank line."""
    if options.omit_annotation_lines:
        return ""

    a_rest = ""
    b_rest = ""
    if options.include_change_counts:
        a_count = str(change_counts.a)
        b_count = str(change_counts.b)
        width = max(len(options.a_annotation), len(options.b_annotation))
        count_width = max(len(a_count), len(b_count))
        a_rest = (
            " " * (width - len(options.a_annotation))
            + "  " + options.a_indicator + " " + a_count.rjust(count_width) + " removed"
        )
        b_rest = (
            " " * (width - len(options.b_annotation))
            + "  " + options.b_indicator + " " + b_count.rjust(count_width) + " added"
        )

    return (
        options.a_color(options.a_indicator + " " + options.a_annotation + a_rest)
        + "\n"
        + options.b_color(options.b_indicator + " " + options.b_annotation + b_rest)
        + "\n\n"
    )


def create_patch_mark(a_start: int, a_end: int, b_start: int, b_end: int, options: DiffOptions) -> str:
    # Unified-diff style: 1-based start and line count per side.
    return options.patch_color(
        f"@@ -{a_start + 1},{a_end - a_start} +{b_start + 1},{b_end - b_start} @@"
    )
