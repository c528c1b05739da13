"""Unit tests for table, CSV and PDF reporting."""

import csv

import pytest

from receipt_tips.core.models import ScanOutcome, ScanStatus
from receipt_tips.core.processor import ReceiptScanner, grand_totals
from receipt_tips.core.reporting import (FAILED_MESSAGE, NO_DATA_MESSAGE, build_summary_pdf,
                                         render_table, write_csv)


@pytest.fixture
def outcomes():
    scanner = ReceiptScanner(recognizer=lambda p: "")
    return [
        scanner.scan_text("Total $10.00\nTip $1.50\nTotal $20.00\nTip $3.00", source="a.jpg"),
        scanner.scan_text("Credit Card $12.34\nTip on Card: $3.00", source="b.jpg"),
        scanner.scan_text("thank you for visiting", source="c.jpg"),
        ScanOutcome(source="d.jpg", status=ScanStatus.FAILED, error="bad image"),
    ]


class TestRenderTable:
    """Test cases for the plain-text table."""

    def test_paired_table(self, outcomes):
        """Test rows and totals for paired records."""
        table = render_table(outcomes[0])
        lines = table.splitlines()

        assert lines[0].split() == ["Type", "Amount"]
        assert [ln.split() for ln in lines[2:6]] == [
            ["Sale", "$10.00"], ["Tip", "$1.50"], ["Sale", "$20.00"], ["Tip", "$3.00"],
        ]
        assert lines[-2].split() == ["Total", "Sales", "$30.00"]
        assert lines[-1].split() == ["Total", "Tips", "$4.50"]

    def test_line_table(self, outcomes):
        """Test rows for line records."""
        table = render_table(outcomes[1])

        assert "Sale" in table and "$12.34" in table
        assert table.splitlines()[-1].split() == ["Total", "Tips", "$3.00"]

    def test_no_data_and_failure_differ(self, outcomes):
        """Test that no-data and failure messages are distinguishable."""
        assert render_table(outcomes[2]) == NO_DATA_MESSAGE
        assert render_table(outcomes[3]).startswith(FAILED_MESSAGE)
        assert "bad image" in render_table(outcomes[3])


def test_write_csv(outcomes, tmp_path):
    """Test one CSV row per record, both shapes."""
    out_csv = tmp_path / "tips.csv"
    write_csv(outcomes, out_csv)

    with out_csv.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 4
    assert rows[0] == {"source": "a.jpg", "kind": "paired", "category": "",
                       "sale": "10.00", "tip": "1.50", "amount": ""}
    assert rows[3] == {"source": "b.jpg", "kind": "line", "category": "Tip",
                       "sale": "", "tip": "", "amount": "3.00"}


def test_build_summary_pdf(outcomes, tmp_path):
    """Test that a PDF is written."""
    out_pdf = tmp_path / "summary.pdf"
    build_summary_pdf(outcomes, out_pdf, grand_totals(outcomes))

    assert out_pdf.read_bytes().startswith(b"%PDF")
