# src/config.py

# Annotation header labels
DEFAULT_A_ANNOTATION = "Expected"
DEFAULT_B_ANNOTATION = "Received"

# Leading glyphs for delete / insert / common lines
DEFAULT_A_INDICATOR = "-"
DEFAULT_B_INDICATOR = "+"
DEFAULT_COMMON_INDICATOR = " "

# Unchanged lines kept around each change when not expanded
DEFAULT_CONTEXT_LINES = 5
DEFAULT_EXPAND = True

# rich style strings for the text decorations
STYLE_A = "green"
STYLE_B = "red"
STYLE_COMMON = "dim"
STYLE_PATCH = "yellow"
STYLE_CHANGE = "reverse"         # edge spaces in changed lines (and indent mismatch)
STYLE_COMMON_BG = "on yellow"    # edge spaces in common lines with same indentation
STYLE_INDENT = "cyan"            # common lines that only differ in indentation

# Returned as-is when both texts are identical
NO_DIFF_MESSAGE = "Compared values have no visual difference."

# Env var that turns on the debug log file
DEBUG_ENV_VAR = "LINE_DIFF_DEBUG"

# User prefs (see src/utils/prefs.py)
PREFS_FILENAME = "prefs.json"
PREFS_KEYS = {"context_lines", "expand", "color"}

# Rounds each bisection of the common-subsequence search may take from
# either end before the region is reported as having nothing in common
SUBSEQUENCE_MAX_EDITS = 500
