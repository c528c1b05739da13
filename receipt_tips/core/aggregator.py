"""
Reduce summary records into sale and tip totals.
"""

from typing import Iterable

from .models import LineRecord, PairedRecord, SummaryRecord, Totals, SALE, TIP


def aggregate(records: Iterable[SummaryRecord]) -> Totals:
    """
    Sum sales and tips across records.

    Paired records contribute both their sale and their tip; line records
    contribute their amount to the total named by their category. Sums keep
    full precision; rounding happens when totals are presented.
    """
    total_sale = 0.0
    total_tip = 0.0
    for r in records:
        if isinstance(r, PairedRecord):
            total_sale += r.sale
            total_tip += r.tip
        elif isinstance(r, LineRecord):
            if r.category == SALE:
                total_sale += r.amount
            elif r.category == TIP:
                total_tip += r.amount
        else:
            raise TypeError(f"Unsupported record type: {type(r).__name__}")
    return Totals(total_sale=total_sale, total_tip=total_tip)
