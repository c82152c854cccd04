# src/core/diff_options.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Optional

from rich.color import ColorSystem
from rich.style import Style

from src.config import (
    DEFAULT_A_ANNOTATION,
    DEFAULT_A_INDICATOR,
    DEFAULT_B_ANNOTATION,
    DEFAULT_B_INDICATOR,
    DEFAULT_COMMON_INDICATOR,
    DEFAULT_CONTEXT_LINES,
    DEFAULT_EXPAND,
    STYLE_A,
    STYLE_B,
    STYLE_CHANGE,
    STYLE_COMMON,
    STYLE_COMMON_BG,
    STYLE_INDENT,
    STYLE_PATCH,
)
from src.utils.logger import get_logger

logger = get_logger(__name__)

Decorate = Callable[[str], str]


def no_color(text: str) -> str:
    return text


def style(definition: str, color_system: ColorSystem = ColorSystem.STANDARD) -> Decorate:
    """Turn a rich style string ("red", "on yellow", "reverse") into a str -> str decoration."""
    parsed = Style.parse(definition)

    def decorate(text: str) -> str:
        if not text:
            return text
        return parsed.render(text, color_system=color_system)

    return decorate


@dataclass(frozen=True)
class DiffOptions:
    """
    Read-only policy for one render. Every field is required here;
    use normalize_diff_options() to get one filled with defaults.
    """
    a_annotation: str
    a_color: Decorate
    a_indicator: str
    b_annotation: str
    b_color: Decorate
    b_indicator: str
    common_color: Decorate
    common_indicator: str
    context_lines: int
    expand: bool
    include_change_counts: bool
    omit_annotation_lines: bool
    patch_color: Decorate
    change_color: Decorate      # background for edge spaces in changed lines
    common_bg_color: Decorate   # background for edge spaces in common lines
    indent_color: Decorate      # foreground for common lines with different indentation


def _defaults(colors: bool) -> Dict[str, Any]:
    deco = style if colors else (lambda _name: no_color)
    return {
        "a_annotation": DEFAULT_A_ANNOTATION,
        "a_color": deco(STYLE_A),
        "a_indicator": DEFAULT_A_INDICATOR,
        "b_annotation": DEFAULT_B_ANNOTATION,
        "b_color": deco(STYLE_B),
        "b_indicator": DEFAULT_B_INDICATOR,
        "common_color": deco(STYLE_COMMON),
        "common_indicator": DEFAULT_COMMON_INDICATOR,
        "context_lines": DEFAULT_CONTEXT_LINES,
        "expand": DEFAULT_EXPAND,
        "include_change_counts": False,
        "omit_annotation_lines": False,
        "patch_color": deco(STYLE_PATCH),
        "change_color": deco(STYLE_CHANGE),
        "common_bg_color": deco(STYLE_COMMON_BG),
        "indent_color": deco(STYLE_INDENT),
    }


def _valid_context_lines(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def normalize_diff_options(
    options: Optional[Dict[str, Any]] = None,
    *,
    colors: bool = True,
    **overrides: Any,
) -> DiffOptions:
    """
    Merge caller options over the defaults.

    `options` and keyword overrides are combined (keywords win). Unknown
    names raise TypeError; an invalid context_lines falls back to the default.
    """
    given: Dict[str, Any] = dict(options or {})
    given.update(overrides)

    known = {f.name for f in fields(DiffOptions)}
    unknown = sorted(set(given) - known)
    if unknown:
        raise TypeError(f"Unknown diff option(s): {', '.join(unknown)}")

    merged = _defaults(colors)
    merged.update({k: v for k, v in given.items() if v is not None})

    if not _valid_context_lines(merged["context_lines"]):
        logger.warning(
            "Invalid context_lines %r, using %d", merged["context_lines"], DEFAULT_CONTEXT_LINES
        )
        merged["context_lines"] = DEFAULT_CONTEXT_LINES

    return DiffOptions(**merged)


def plain_options(**overrides: Any) -> DiffOptions:
    """Undecorated options, handy for tests and non-tty output."""
    return normalize_diff_options(colors=False, **overrides)
