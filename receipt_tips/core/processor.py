"""
Main receipt scanning orchestration.
"""

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set

from .aggregator import aggregate
from .categorization import ExtractorConfig
from .extractor import extract
from .models import ScanOutcome, ScanStatus, Totals
from .ocr import DEFAULT_LANG, recognize
from .utils import IMAGE_EXTS, PDF_EXTS, money_fmt

logger = logging.getLogger(__name__)

Recognizer = Callable[[Path], str]


class ReceiptScanner:
    """Runs receipts through OCR, extraction and aggregation."""

    def __init__(self, recognizer: Optional[Recognizer] = None,
                 config: Optional[ExtractorConfig] = None,
                 lang: str = DEFAULT_LANG,
                 verbose: bool = False):
        """
        Initialize receipt scanner.

        Args:
            recognizer: Callable turning a file path into text (default: Tesseract/PyMuPDF)
            config: Extractor keyword and pairing options
            lang: Tesseract language passed to the default recognizer
            verbose: Whether to show verbose debugging output
        """
        self.recognizer = recognizer or partial(recognize, lang=lang)
        self.config = config or ExtractorConfig()
        self.lang = lang
        self.verbose = verbose

    def discover_files(self, folder: Path, exts: Optional[Set[str]] = None) -> List[Path]:
        """Discover receipt files in a folder, sorted by name (images and PDFs by default)."""
        exts = exts if exts is not None else IMAGE_EXTS.union(PDF_EXTS)
        if not folder.is_dir():
            print(f"[WARN] Not a directory: {folder}")
            return []
        files = sorted(
            (p for p in folder.iterdir()
             if p.is_file() and p.suffix.lower() in exts),
            key=lambda p: p.name,
        )
        print(f"[INFO] Found {len(files)} file(s) in {folder}")
        return files

    def scan_text(self, text: str, source: str = "<text>") -> ScanOutcome:
        """Extract and total the records in a transcript."""
        text = text or ""
        result = extract(text, self.config)
        totals = aggregate(result.records)
        status = ScanStatus.FOUND if result.found else ScanStatus.NO_DATA

        if self.verbose:
            print(f"  [DEBUG] Strategy: {result.strategy or '(none)'}")
            print(f"  [DEBUG] Records: {len(result.records)}")
            print(f"  [DEBUG] Totals: sale {money_fmt(totals.total_sale)}, "
                  f"tip {money_fmt(totals.total_tip)}")
            if not result.found:
                print(f"  [DEBUG] First 5 lines of OCR text:")
                for i, line in enumerate(text.splitlines()[:5], 1):
                    print(f"    {i}: {line[:80]}")
        for entry in result.unpaired:
            print(f"  [WARN] Unpaired {entry.label} {money_fmt(entry.amount)} in {source}")

        return ScanOutcome(source=source, status=status, text=text,
                           result=result, totals=totals)

    def scan_file(self, path: Path) -> ScanOutcome:
        """
        Scan a single receipt file.

        Any exception raised while recognizing or interpreting the file is
        reported as a FAILED outcome, never as NO_DATA.
        """
        print(f"[INFO] Processing {path.name}")
        try:
            text = self.recognizer(path)
            return self.scan_text(text, source=path.name)
        except Exception as e:
            logger.debug("Scan failed", exc_info=True)
            print(f"[ERROR] Failed {path.name}: {e}")
            return ScanOutcome(source=path.name, status=ScanStatus.FAILED, error=str(e))

    def scan_all(self, paths: Iterable[Path]) -> List[ScanOutcome]:
        """Scan every file in order."""
        outcomes = [self.scan_file(p) for p in paths]
        found = sum(1 for o in outcomes if o.status == ScanStatus.FOUND)
        failed = sum(1 for o in outcomes if o.status == ScanStatus.FAILED)
        print(f"[INFO] Scanned {len(outcomes)} receipt(s): {found} with data, "
              f"{len(outcomes) - found - failed} without data, {failed} failed")
        return outcomes


def grand_totals(outcomes: Iterable[ScanOutcome]) -> Totals:
    """Aggregate the records of every outcome that found data."""
    records = []
    for o in outcomes:
        if o.status == ScanStatus.FOUND:
            records.extend(o.records)
    return aggregate(records)
