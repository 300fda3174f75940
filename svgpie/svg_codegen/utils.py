import math
import re
import unicodedata

# XML 1.0 forbids most C0 control characters, even escaped
_CONTROL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


def clean_text(text: str) -> str:
    """Normalize label text and drop characters XML cannot carry."""
    return _CONTROL_RE.sub('', unicodedata.normalize('NFC', text))


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for SVG output")
    formatted = f"{value:.4f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
