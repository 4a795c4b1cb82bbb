"""Confirmation view shown once a donation has been recorded"""

from dataclasses import dataclass, field
from typing import List, Optional

from noel_solidarite.domain.catalog import CAUSE_LABELS, DONATION_TYPE_LABELS, PAYMENT_METHOD_LABELS
from noel_solidarite.domain.models import TaxBenefit
from noel_solidarite.domain.submission import DonationSubmission
from noel_solidarite.domain.tax import GIFTS_PER_EURO, TAX_REDUCTION_RATE, calculate_impact, calculate_tax_benefit

PHONE_NOT_PROVIDED = "Non fourni"


def format_euros(amount: float) -> str:
    """20.0 -> "20", 12.5 -> "12,50" (French decimal comma)"""
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}".replace(".", ",")


@dataclass
class DonationConfirmation:
    """Everything the confirmation page displays, built from the donor's own submission"""

    amount: float
    donation_type_label: str
    cause_label: str
    tax_benefit: TaxBenefit
    gifts: int
    last_name: str
    first_name: str
    email: str
    phone: str
    address_line: str
    city_line: str
    payment_method_label: str
    donation_id: Optional[str] = None
    next_steps: List[str] = field(default_factory=list)

    @classmethod
    def from_submission(
        cls,
        submission: DonationSubmission,
        donation_id: Optional[str] = None,
        tax_rate: float = TAX_REDUCTION_RATE,
        gifts_per_euro: int = GIFTS_PER_EURO,
    ) -> "DonationConfirmation":
        address_line = submission.address
        if submission.address_complement:
            address_line = f"{address_line}, {submission.address_complement}"

        return cls(
            amount=submission.amount,
            donation_type_label=DONATION_TYPE_LABELS.get(submission.donation_type, submission.donation_type),
            cause_label=CAUSE_LABELS.get(submission.cause, submission.cause),
            tax_benefit=calculate_tax_benefit(submission.amount, tax_rate),
            gifts=calculate_impact(submission.amount, gifts_per_euro),
            last_name=submission.last_name,
            first_name=submission.first_name,
            email=submission.email,
            phone=submission.phone or PHONE_NOT_PROVIDED,
            address_line=address_line,
            city_line=f"{submission.zip_code} {submission.city}",
            payment_method_label=PAYMENT_METHOD_LABELS.get(submission.payment_method, submission.payment_method),
            donation_id=donation_id,
            next_steps=[
                f"Un e-mail de confirmation a été envoyé à {submission.email}",
                "Vous recevrez un reçu fiscal pour déclarer votre don aux impôts",
                "Vous serez informé de l'impact de votre don via nos newsletters",
            ],
        )
