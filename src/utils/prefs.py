# src/utils/prefs.py

import json
from pathlib import Path
from platformdirs import user_config_dir

from src.config import PREFS_FILENAME, PREFS_KEYS
from src.utils.logger import get_logger, APP_NAME, APP_AUTHOR

logger = get_logger(__name__)

def _prefs_path() -> Path:
    cfg_dir = Path(user_config_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / PREFS_FILENAME

def load_prefs(path: Path | None = None) -> dict:
    """Saved CLI defaults; unknown keys are dropped."""
    p = path or _prefs_path()
    if p.exists():
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except Exception as e:
            logger.warning("Ignoring unreadable prefs file %s: %s", p, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if k in PREFS_KEYS}
    return {}

def save_prefs(data: dict, path: Path | None = None) -> None:
    p = path or _prefs_path()
    clean = {k: v for k, v in data.items() if k in PREFS_KEYS}
    try:
        p.write_text(json.dumps(clean, indent=2), encoding="utf-8")
        logger.info("Prefs saved to %s", p)
    except Exception as e:
        logger.error("Failed to save prefs to %s: %s", p, e)
