"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class DonationStatus(str, Enum):
    """Lifecycle state of a stored donation"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


@dataclass
class Donor:
    """Identity and postal address of the person or entity giving"""

    title: str
    last_name: str
    first_name: str
    email: str
    address: str
    zip_code: str
    city: str
    country: str = "France"
    address_complement: Optional[str] = None
    phone: Optional[str] = None
    organization: bool = False


@dataclass
class PaymentPreference:
    """How the donor intends to pay"""

    method: str  # "card", "sepa" or "cheque"
    cover_fees: bool = False


@dataclass
class DonationRecord:
    """Accepted donation as owned by the intake service"""

    id: str
    donation_type: str  # "ponctuel" or "regulier"
    amount: float
    cause: str
    donor: Donor
    payment: PaymentPreference
    created_at: datetime
    how_did_you_know: Optional[str] = None
    status: DonationStatus = DonationStatus.PENDING


@dataclass
class DonationStats:
    """Aggregate view over every stored donation"""

    total_donations: int
    total_amount: float
    average_donation: float
    by_type: Dict[str, int] = field(default_factory=dict)
    by_cause: Dict[str, int] = field(default_factory=dict)


@dataclass
class TaxBenefit:
    """Tax reduction preview shown before and after submission"""

    gross: float
    reduction: int
    net: int


@dataclass
class SubmissionReceipt:
    """What the donation pages keep from a successful intake response"""

    donation_id: str
    message: str
    donation: Dict[str, Any] = field(default_factory=dict)
