# src/utils/logger.py

import logging
import os
from pathlib import Path
from platformdirs import user_log_dir

from src.config import DEBUG_ENV_VAR

APP_NAME = "Line Diff"
APP_AUTHOR = "LineDiff"


def level_from_env(value: str | None) -> int | None:
    """
    Map LINE_DIFF_DEBUG to a logging level.

    Unset/empty/"0" means silent (None); a level name ("info", "WARNING")
    picks that level; anything else ("1", "yes") means DEBUG.
    """
    if not value or value.strip() == "0":
        return None
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.DEBUG


def setup_logger(level: int | None = None):
    """Configure the app logger; `level` overrides the env var."""
    logger = logging.getLogger(APP_NAME)
    if level is None:
        level = level_from_env(os.environ.get(DEBUG_ENV_VAR))

    # Default: silence everything unless LINE_DIFF_DEBUG is set
    if level is None:
        logger.setLevel(logging.CRITICAL)
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        logger.propagate = False
        return logger

    # Debug mode: write to user logs, and let run.py's stderr handler see it
    logger.setLevel(level)
    logger.propagate = True
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        log_dir = Path(user_log_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "app.debug.log", encoding="utf-8")
        fh.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
        logger.addHandler(fh)
    for h in logger.handlers:
        h.setLevel(level)
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child of the app logger named after the module ("Line Diff.core.subsequence")."""
    if module_name.startswith("src."):
        module_name = module_name[len("src."):]
    return logging.getLogger(f"{APP_NAME}.{module_name}")


logger = setup_logger()
