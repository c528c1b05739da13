"""
Keyword rules for classifying receipt lines as sales or tips.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from .models import SALE, TIP

DEFAULT_SALE_KEYWORDS = ("credit", "card", "charge")
DEFAULT_TIP_KEYWORDS = ("tip",)


@dataclass(frozen=True)
class ExtractorConfig:
    """Keyword sets and pairing options used by the extractor."""
    sale_keywords: Tuple[str, ...] = DEFAULT_SALE_KEYWORDS
    tip_keywords: Tuple[str, ...] = DEFAULT_TIP_KEYWORDS
    report_unpaired: bool = False

    def __post_init__(self):
        sale = tuple(k.lower() for k in self.sale_keywords)
        tip = tuple(k.lower() for k in self.tip_keywords)
        object.__setattr__(self, "sale_keywords", sale)
        object.__setattr__(self, "tip_keywords", tip)


def load_rules(path: Path) -> Dict:
    """Load keyword rules from JSON file."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _keywords(value, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """A single keyword string counts as a one-item list."""
    if not value:
        return default
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def config_from_rules(rules: Dict, report_unpaired: Optional[bool] = None) -> ExtractorConfig:
    """
    Build an extractor config from a rules dictionary.

    Args:
        rules: Rules dictionary with format (every key optional):
            {
              "sale_keywords": ["credit", "card", "charge"],
              "tip_keywords": ["tip", "gratuity"],
              "report_unpaired": false
            }
        report_unpaired: Overrides the rules file when not None

    Returns:
        ExtractorConfig
    """
    if report_unpaired is None:
        report_unpaired = _flag(rules.get("report_unpaired", False))
    return ExtractorConfig(
        sale_keywords=_keywords(rules.get("sale_keywords"), DEFAULT_SALE_KEYWORDS),
        tip_keywords=_keywords(rules.get("tip_keywords"), DEFAULT_TIP_KEYWORDS),
        report_unpaired=report_unpaired,
    )


def classify_line(line: str, config: Optional[ExtractorConfig] = None) -> Optional[str]:
    """
    Classify a receipt line by its keywords.

    Returns "Tip" when the line mentions a tip keyword (even alongside a sale
    keyword), "Sale" when it only mentions a sale keyword, None otherwise.
    """
    config = config or ExtractorConfig()
    lower = (line or "").lower()
    if any(k in lower for k in config.tip_keywords):
        return TIP
    if any(k in lower for k in config.sale_keywords):
        return SALE
    return None
