# src/utils/encoding_detector.py

import chardet
from src.utils.logger import get_logger

logger = get_logger(__name__)

def detect_file_encoding(file_path: str) -> str:
    """
    Detect the encoding of a file about to be diffed.

    Args:
        file_path (str): Path to the file

    Returns:
        str: Detected encoding or 'utf-8' as fallback
    """
    try:
        with open(file_path, 'rb') as f:
            raw = f.read(10000)  # Read first 10KB
        # Fast path: a truncated multi-byte char at the 10KB cut is still UTF-8
        try:
            raw.decode('utf-8')
            return 'utf-8'
        except UnicodeDecodeError as e:
            if e.start >= len(raw) - 3 and e.reason == 'unexpected end of data':
                return 'utf-8'
        result = chardet.detect(raw)
        enc = result.get('encoding') or 'utf-8'
        logger.debug("chardet picked %s for %s", enc, file_path)
        return enc
    except OSError as e:
        logger.error(f"Failed to detect encoding for {file_path}: {str(e)}")
        return 'utf-8'


def read_text(file_path: str) -> str:
    """Read a whole file with its detected encoding, replacing bad bytes."""
    encoding = detect_file_encoding(file_path)
    with open(file_path, "r", encoding=encoding, errors="replace") as f:
        return f.read()
