"""
Extract sale and tip records from receipt text.

Two strategies are tried in order:

1. Labeled summary matching: every "Total <amount>" is paired, in order of
   appearance, with every "Tip <amount>".
2. Keyword line fallback: every money token on a line mentioning a card
   charge or a tip becomes a Sale or Tip record.

Extraction is best-effort and never raises for any input string.
"""

import logging
from typing import List, Optional, Tuple

from .categorization import ExtractorConfig, classify_line
from .models import ExtractionResult, LineRecord, PairedRecord, UnpairedEntry
from .utils import (MONEY_TOKEN_PATTERN, TIP_PATTERN, TOTAL_PATTERN,
                    normalize_amount, split_lines)

logger = logging.getLogger(__name__)

LABELED = "labeled"
KEYWORD = "keyword"


def find_labeled_amounts(text: str) -> Tuple[List[float], List[float]]:
    """Return (totals, tips) in order of appearance."""
    totals = [normalize_amount(m.group(1)) for m in TOTAL_PATTERN.finditer(text)]
    tips = [normalize_amount(m.group(1)) for m in TIP_PATTERN.finditer(text)]
    return totals, tips


def pair_totals_and_tips(totals: List[float], tips: List[float]) -> List[PairedRecord]:
    """Pair the i-th total with the i-th tip; surplus entries are dropped."""
    return [PairedRecord(sale=sale, tip=tip) for sale, tip in zip(totals, tips)]


def find_unpaired(totals: List[float], tips: List[float]) -> List[UnpairedEntry]:
    """List the totals or tips beyond the shorter of the two lists."""
    n = min(len(totals), len(tips))
    unpaired = [UnpairedEntry("total", amt, i) for i, amt in enumerate(totals[n:], start=n)]
    unpaired += [UnpairedEntry("tip", amt, i) for i, amt in enumerate(tips[n:], start=n)]
    return unpaired


def extract_line_records(text: str, config: Optional[ExtractorConfig] = None) -> List[LineRecord]:
    """Collect a record for every money token on a keyword line."""
    records = []
    for ln in split_lines(text):
        category = classify_line(ln, config)
        if category is None:
            continue
        for m in MONEY_TOKEN_PATTERN.finditer(ln):
            if m.group(1) is None:
                continue  # negative amount
            records.append(LineRecord(category=category, amount=normalize_amount(m.group(1))))
    return records


def extract(text: str, config: Optional[ExtractorConfig] = None) -> ExtractionResult:
    """
    Extract summary records from OCR text.

    Args:
        text: Raw OCR transcript (may be empty)
        config: Keyword and pairing options (defaults used when None)

    Returns:
        ExtractionResult; found is False when neither strategy matched
    """
    config = config or ExtractorConfig()
    text = text or ""

    totals, tips = find_labeled_amounts(text)
    pairs = pair_totals_and_tips(totals, tips)
    if pairs:
        unpaired = find_unpaired(totals, tips)
        if unpaired:
            logger.debug(f"Dropping {len(unpaired)} unpaired entries "
                         f"({len(totals)} totals, {len(tips)} tips)")
        if unpaired and config.report_unpaired:
            for entry in unpaired:
                logger.warning(f"Unpaired {entry.label} #{entry.position + 1}: {entry.amount:.2f}")
        return ExtractionResult(
            records=tuple(pairs),
            strategy=LABELED,
            unpaired=tuple(unpaired) if config.report_unpaired else (),
        )

    logger.debug(f"No labeled pairs ({len(totals)} totals, {len(tips)} tips), "
                 f"falling back to keyword lines")
    lines = extract_line_records(text, config)
    if lines:
        return ExtractionResult(records=tuple(lines), strategy=KEYWORD)

    return ExtractionResult()
