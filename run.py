import os
import sys
import logging

from src.config import DEBUG_ENV_VAR
from src.utils.logger import level_from_env

# ---------- Logging ----------
# Echo the debug log to stderr too when LINE_DIFF_DEBUG is set
_level = level_from_env(os.environ.get(DEBUG_ENV_VAR))
if _level is not None:
    logging.basicConfig(
        level=_level,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.info("Python %s", sys.version)

# ---------- Start CLI ----------
from src.utils.logger import logger  # noqa: E402
from src.cli import main  # noqa: E402

if __name__ == "__main__":
    try:
        rc = main()
        logger.info("Exited with code %s", rc)
        sys.exit(rc)
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        raise
