"""
Utility functions and constants for receipt processing.
"""

import re
from typing import Optional

# File type constants
IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"}
PDF_EXTS = {".pdf"}
TEXT_EXTS = {".txt"}

# Labeled summary patterns: label, optional currency marker, amount with exactly two decimals
TOTAL_PATTERN = re.compile(r"total\s*(?:US\$|\$)?\s*(\d[\d,]*\.\d{2})(?!\d)", re.IGNORECASE)
TIP_PATTERN = re.compile(r"tip\s*(?:US\$|\$)?\s*(\d[\d,]*\.\d{2})(?!\d)", re.IGNORECASE)

# Money-shaped tokens inside keyword lines (e.g. $12.34, 12.3, 45).
# The first alternative swallows a signed amount whole; group 1 is None for it.
MONEY_TOKEN_PATTERN = re.compile(r"(?<![\w.])-\$?(?:\d+\.\d{1,2}|\d+)|\$?(\d+\.\d{1,2}|\d+)")

CURRENCY_SYMBOLS = ("US$", "$")


def normalize_amount(s: str) -> float:
    """Normalize amount string to float, 0.0 when it cannot be parsed."""
    if not s:
        return 0.0
    for symbol in CURRENCY_SYMBOLS:
        s = s.replace(symbol, "")
    s = s.replace(",", "").replace(" ", "")
    try:
        return float(s)
    except ValueError:
        return 0.0


def split_lines(text: str) -> list[str]:
    """Split text on newlines into trimmed, non-empty lines."""
    return [ln.strip() for ln in (text or "").split("\n") if ln.strip()]


def money_fmt(v: Optional[float]) -> str:
    """Format amount as currency."""
    return f"${v:.2f}" if v is not None else ""
