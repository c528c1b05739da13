"""
Data models for receipt summary extraction.
"""

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Optional, Tuple, Union

SALE = "Sale"
TIP = "Tip"


@dataclass(frozen=True)
class PairedRecord:
    """A sale amount paired with its tip (labeled summary strategy)."""
    sale: float
    tip: float
    kind: str = field(default="paired", init=False)

    def to_dict(self):
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class LineRecord:
    """A single amount from a keyword line (fallback strategy)."""
    category: str
    amount: float
    kind: str = field(default="line", init=False)

    def to_dict(self):
        """Convert to dictionary."""
        return asdict(self)


SummaryRecord = Union[PairedRecord, LineRecord]


@dataclass(frozen=True)
class UnpairedEntry:
    """A labeled total or tip left over after pairing."""
    label: str
    amount: float
    position: int


@dataclass(frozen=True)
class ExtractionResult:
    """Records extracted from one receipt transcript."""
    records: Tuple[SummaryRecord, ...] = ()
    strategy: Optional[str] = None
    unpaired: Tuple[UnpairedEntry, ...] = ()

    @property
    def found(self) -> bool:
        return len(self.records) > 0


@dataclass(frozen=True)
class Totals:
    """Sale and tip sums; rounded only when presented."""
    total_sale: float = 0.0
    total_tip: float = 0.0

    def to_dict(self):
        """Convert to dictionary with amounts rounded to cents."""
        return {
            "total_sale": round(self.total_sale, 2),
            "total_tip": round(self.total_tip, 2),
        }


class ScanStatus(str, Enum):
    """Outcome of scanning one receipt."""
    FOUND = "found"
    NO_DATA = "no_data"
    FAILED = "failed"


@dataclass
class ScanOutcome:
    """Result of running one receipt through OCR, extraction and aggregation."""
    source: str
    status: ScanStatus
    text: str = ""
    result: ExtractionResult = field(default_factory=ExtractionResult)
    totals: Totals = field(default_factory=Totals)
    error: Optional[str] = None

    @property
    def records(self) -> Tuple[SummaryRecord, ...]:
        return self.result.records

    def to_dict(self):
        """Convert to the result payload: records plus totals."""
        payload = {
            "source": self.source,
            "status": self.status.value,
            "found": self.result.found,
            "records": [r.to_dict() for r in self.result.records],
        }
        payload.update(self.totals.to_dict())
        if self.result.unpaired:
            payload["unpaired"] = [asdict(u) for u in self.result.unpaired]
        if self.error:
            payload["error"] = self.error
        return payload
