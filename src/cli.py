from __future__ import annotations

import os
import sys
import argparse
from typing import List

from src.config import DEFAULT_CONTEXT_LINES, DEFAULT_EXPAND, NO_DIFF_MESSAGE
from src.core.diff_lines import render_diff
from src.core.diff_options import normalize_diff_options
from src.core.line_normalizer import unindent
from src.utils.encoding_detector import read_text
from src.utils.logger import get_logger
from src.utils.prefs import load_prefs, save_prefs

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Show an annotated line diff of two text files")
    p.add_argument("expected", help="File with the expected text")
    p.add_argument("actual", help="File with the received text")
    p.add_argument("--expand", dest="expand", action="store_true", default=None, help="Show every line")
    p.add_argument("--no-expand", dest="expand", action="store_false", help="Show only changes with context")
    p.add_argument("-U", "--context", type=int, default=None, help="Context lines around changes (with --no-expand)")
    p.add_argument("--no-color", dest="color", action="store_false", default=None, help="Plain text output")
    p.add_argument("--color", dest="color", action="store_true", help="Force colored output")
    p.add_argument("--ignore-indentation", action="store_true", help="Compare lines without leading whitespace")
    p.add_argument("--counts", action="store_true", help="Add removed/added counts to the header")
    p.add_argument("--save-prefs", action="store_true", help="Remember --expand/--context/--color as defaults")
    return p


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    missing = [f for f in (args.expected, args.actual) if not os.path.isfile(f)]
    if missing:
        print(f"File(s) not found: {', '.join(missing)}", file=sys.stderr)
        return 2

    prefs = load_prefs()
    expand = args.expand if args.expand is not None else prefs.get("expand", DEFAULT_EXPAND)
    context = args.context if args.context is not None else prefs.get("context_lines", DEFAULT_CONTEXT_LINES)
    color = args.color if args.color is not None else prefs.get("color", sys.stdout.isatty())

    if args.save_prefs:
        save_prefs({"expand": expand, "context_lines": context, "color": color})

    options = normalize_diff_options(
        colors=bool(color),
        expand=bool(expand),
        context_lines=context,
        include_change_counts=args.counts,
    )

    a = read_text(args.expected)
    b = read_text(args.actual)
    logger.info("Diffing %s against %s", args.expected, args.actual)

    if args.ignore_indentation:
        out = render_diff(unindent(a), unindent(b), options, (a, b))
    else:
        out = render_diff(a, b, options)

    print(out)
    return 0 if out == NO_DIFF_MESSAGE else 1


if __name__ == "__main__":
    raise SystemExit(main())
