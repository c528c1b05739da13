#!/usr/bin/env python3
"""
Main CLI entrypoint for receipt tip extraction.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from receipt_tips.core.categorization import config_from_rules, load_rules
from receipt_tips.core.models import ScanStatus
from receipt_tips.core.ocr import DEFAULT_LANG
from receipt_tips.core.processor import ReceiptScanner, grand_totals
from receipt_tips.core.reporting import (build_summary_pdf, render_table,
                                         totals_rows, write_csv)
from receipt_tips.core.utils import TEXT_EXTS


def read_transcript(path: Path) -> str:
    """Read a saved OCR transcript instead of running OCR."""
    return path.read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="receipt-tips",
        description="OCR receipts and extract card sales and tips",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scan a single photo
  receipt-tips receipt.jpg

  # Scan every image/PDF in a folder and export the records
  receipt-tips --incoming ./receipts --csv tips.csv --pdf tips.pdf

  # Re-run extraction on saved OCR transcripts
  receipt-tips --text scan1.txt scan2.txt
        """
    )
    parser.add_argument("paths", nargs="*",
                        help="Receipt images/PDFs (or transcripts with --text)")
    parser.add_argument("--incoming",
                        help="Folder of receipts to scan in addition to PATHS")
    parser.add_argument("--rules", default=os.getenv("RECEIPT_RULES", "./rules.json"),
                        help="Keyword rules JSON (default: ./rules.json, or RECEIPT_RULES env var)")
    parser.add_argument("--lang", default=os.getenv("RECEIPT_OCR_LANG", DEFAULT_LANG),
                        help="Tesseract language (default: eng, or RECEIPT_OCR_LANG env var)")
    parser.add_argument("--report-unpaired", action="store_true", default=None,
                        help="Warn about totals/tips that could not be paired")
    parser.add_argument("--text", action="store_true",
                        help="Treat PATHS and .txt files under --incoming as UTF-8 OCR transcripts; skip OCR")
    parser.add_argument("--csv", help="Write extracted records to this CSV file")
    parser.add_argument("--pdf", help="Write a summary PDF to this file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show detailed parsing information for debugging")
    return parser


def main(argv=None):
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    rules_path = Path(args.rules)
    rules = load_rules(rules_path)
    if rules:
        print(f"[INFO] Using keyword rules from {rules_path}")
    config = config_from_rules(rules, report_unpaired=args.report_unpaired)

    scanner = ReceiptScanner(
        recognizer=read_transcript if args.text else None,
        config=config,
        lang=args.lang,
        verbose=args.verbose,
    )

    paths = [Path(p) for p in args.paths]
    if args.incoming:
        exts = TEXT_EXTS if args.text else None
        paths.extend(scanner.discover_files(Path(args.incoming), exts))
    if not paths:
        parser.error("no receipts given (pass PATHS or --incoming)")

    outcomes = scanner.scan_all(paths)

    for o in outcomes:
        print()
        print(f"== {o.source}")
        print(render_table(o))

    grand = grand_totals(outcomes)
    if len(outcomes) > 1:
        print()
        print("== All receipts")
        for label, amt in totals_rows(grand):
            print(f"{label}: {amt}")

    if args.csv:
        out_csv = Path(args.csv)
        write_csv(outcomes, out_csv)
        print(f"[OK] Wrote {out_csv}")

    if args.pdf:
        out_pdf = Path(args.pdf)
        build_summary_pdf(outcomes, out_pdf, grand)
        print(f"[OK] Wrote {out_pdf}")

    if all(o.status == ScanStatus.FAILED for o in outcomes):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
