"""
Table, CSV and PDF reporting of scan outcomes.
"""

import csv
import datetime as dt
from pathlib import Path
from typing import List, Tuple

from .models import PairedRecord, ScanOutcome, ScanStatus, Totals
from .utils import money_fmt

NO_DATA_MESSAGE = "No receipt data found. Try another photo."
FAILED_MESSAGE = "Something went wrong while reading the receipt."

CSV_FIELDS = ["source", "kind", "category", "sale", "tip", "amount"]


def record_rows(outcome: ScanOutcome) -> List[Tuple[str, str]]:
    """Flatten an outcome's records into (type, amount) display rows."""
    rows = []
    for r in outcome.records:
        if isinstance(r, PairedRecord):
            rows.append(("Sale", money_fmt(r.sale)))
            rows.append(("Tip", money_fmt(r.tip)))
        else:
            rows.append((r.category, money_fmt(r.amount)))
    return rows


def totals_rows(totals: Totals) -> List[Tuple[str, str]]:
    return [
        ("Total Sales", money_fmt(totals.total_sale)),
        ("Total Tips", money_fmt(totals.total_tip)),
    ]


def render_table(outcome: ScanOutcome) -> str:
    """Render an outcome as a plain-text Type/Amount table."""
    if outcome.status == ScanStatus.FAILED:
        return f"{FAILED_MESSAGE} ({outcome.error})" if outcome.error else FAILED_MESSAGE
    if outcome.status == ScanStatus.NO_DATA:
        return NO_DATA_MESSAGE

    rows = record_rows(outcome) + totals_rows(outcome.totals)
    label_w = max(len("Type"), *(len(label) for label, _ in rows))
    amount_w = max(len("Amount"), *(len(amt) for _, amt in rows))
    n_records = len(rows) - 2

    lines = [f"{'Type':<{label_w}}  {'Amount':>{amount_w}}",
             f"{'-' * label_w}  {'-' * amount_w}"]
    for i, (label, amt) in enumerate(rows):
        if i == n_records:
            lines.append(f"{'-' * label_w}  {'-' * amount_w}")
        lines.append(f"{label:<{label_w}}  {amt:>{amount_w}}")
    return "\n".join(lines)


def write_csv(outcomes: List[ScanOutcome], out_csv: Path):
    """Write one CSV row per extracted record."""
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for o in outcomes:
            for r in o.records:
                row = {"source": o.source, "kind": r.kind}
                if isinstance(r, PairedRecord):
                    row.update({"sale": f"{r.sale:.2f}", "tip": f"{r.tip:.2f}"})
                else:
                    row.update({"category": r.category, "amount": f"{r.amount:.2f}"})
                w.writerow({k: row.get(k, "") for k in CSV_FIELDS})


def build_summary_pdf(outcomes: List[ScanOutcome], out_pdf: Path,
                      grand: Totals,
                      title: str = "Receipt Tips Summary"):
    """
    Build a summary PDF: grand totals, then each receipt's records and totals.

    Args:
        outcomes: Scan outcomes in display order
        out_pdf: Output PDF path
        grand: Totals across every receipt with data
        title: Report title
    """
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas
    from reportlab.lib.units import inch

    c = canvas.Canvas(out_pdf.as_posix(), pagesize=letter)
    width, height = letter

    def next_line(y, step=0.2 * inch):
        y -= step
        if y < 1 * inch:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - 1 * inch
        return y

    # Title
    y = height - 1 * inch
    c.setFont("Helvetica-Bold", 16)
    c.drawString(1 * inch, y, title)
    y -= 0.3 * inch
    c.setFont("Helvetica", 10)
    timestamp = dt.datetime.now().isoformat(timespec='seconds')
    c.drawString(1 * inch, y, f"Generated: {timestamp}")
    y -= 0.4 * inch

    # Grand totals
    c.setFont("Helvetica-Bold", 12)
    c.drawString(1 * inch, y, "Totals")
    y -= 0.25 * inch
    c.setFont("Helvetica", 10)
    for label, amt in totals_rows(grand):
        c.drawString(1.1 * inch, y, label)
        c.drawRightString(4.5 * inch, y, amt)
        y = next_line(y)

    # Per-receipt sections
    for o in outcomes:
        y = next_line(y, 0.3 * inch)
        c.setFont("Helvetica-Bold", 11)
        c.drawString(1 * inch, y, o.source)
        c.setFont("Helvetica", 10)
        y = next_line(y, 0.25 * inch)

        if o.status == ScanStatus.FAILED:
            c.drawString(1.1 * inch, y, FAILED_MESSAGE)
            y = next_line(y)
            continue
        if o.status == ScanStatus.NO_DATA:
            c.drawString(1.1 * inch, y, NO_DATA_MESSAGE)
            y = next_line(y)
            continue

        for label, amt in record_rows(o):
            c.drawString(1.1 * inch, y, label)
            c.drawRightString(4.5 * inch, y, amt)
            y = next_line(y, 0.18 * inch)
        c.line(1.0 * inch, y + 0.1 * inch, 4.6 * inch, y + 0.1 * inch)
        c.setFont("Helvetica-Bold", 10)
        for label, amt in totals_rows(o.totals):
            c.drawString(1.1 * inch, y, label)
            c.drawRightString(4.5 * inch, y, amt)
            y = next_line(y, 0.18 * inch)
        c.setFont("Helvetica", 10)

    c.showPage()
    c.save()
