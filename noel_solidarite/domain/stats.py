"""Aggregate statistics over stored donations"""

from typing import Dict, Iterable

from noel_solidarite.domain.models import DonationRecord, DonationStats
from noel_solidarite.utils.rounding import round_to_cents


def compute_stats(records: Iterable[DonationRecord]) -> DonationStats:
    """
    Compute totals, mean and breakdowns in a single pass.

    Requirements:
    - byType always reports both "ponctuel" and "regulier"
    - byCause only lists causes that received at least one donation
    - averageDonation rounded to cents, 0 when nothing is stored
    """
    total_donations = 0
    total_amount = 0.0
    by_type: Dict[str, int] = {"ponctuel": 0, "regulier": 0}
    by_cause: Dict[str, int] = {}

    for record in records:
        total_donations += 1
        total_amount += record.amount
        if record.donation_type in by_type:
            by_type[record.donation_type] += 1
        by_cause[record.cause] = by_cause.get(record.cause, 0) + 1

    average = total_amount / total_donations if total_donations > 0 else 0.0

    return DonationStats(
        total_donations=total_donations,
        total_amount=total_amount,
        average_donation=round_to_cents(average),
        by_type=by_type,
        by_cause=by_cause,
    )
