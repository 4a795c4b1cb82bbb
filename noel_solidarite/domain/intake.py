"""Turning a validated submission into the record the intake service stores"""

from datetime import datetime, timezone

from noel_solidarite.domain.identifiers import generate_donation_id
from noel_solidarite.domain.models import DonationRecord, DonationStatus, Donor, PaymentPreference
from noel_solidarite.domain.submission import DonationSubmission


def build_donation_record(submission: DonationSubmission, now: datetime | None = None) -> DonationRecord:
    """
    Restructure a flat submission into donor, payment and donation fields.

    The id and createdAt share the same instant. Status starts at pending;
    nothing in this service advances it since no payment is processed.
    """
    now = now or datetime.now(timezone.utc)

    donor = Donor(
        title=submission.title,
        last_name=submission.last_name,
        first_name=submission.first_name,
        email=submission.email,
        address=submission.address,
        address_complement=submission.address_complement,
        zip_code=submission.zip_code,
        city=submission.city,
        country=submission.country,
        phone=submission.phone,
        organization=submission.organization,
    )

    return DonationRecord(
        id=generate_donation_id(now),
        donation_type=submission.donation_type,
        amount=submission.amount,
        cause=submission.cause,
        donor=donor,
        payment=PaymentPreference(method=submission.payment_method, cover_fees=submission.cover_fees),
        how_did_you_know=submission.how_did_you_know,
        created_at=now,
        status=DonationStatus.PENDING,
    )
