"""
Receipt Tips

Extracts card sales and tips from OCR'd receipt photos and totals them.
"""

__version__ = "1.0.0"
__author__ = "Receipt Tips Contributors"

from receipt_tips.core.aggregator import aggregate
from receipt_tips.core.extractor import extract
from receipt_tips.core.models import (ExtractionResult, LineRecord, PairedRecord,
                                      ScanOutcome, ScanStatus, Totals)

__all__ = [
    "aggregate",
    "extract",
    "ExtractionResult",
    "LineRecord",
    "PairedRecord",
    "ScanOutcome",
    "ScanStatus",
    "Totals",
]
