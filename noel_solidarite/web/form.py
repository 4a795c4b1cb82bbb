"""Donation form state: amount selection, validation, tax preview and submission"""

import logging
import math
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from noel_solidarite.domain.catalog import DEFAULT_CAUSE, DEFAULT_COUNTRY
from noel_solidarite.domain.exceptions import IntakeServiceError
from noel_solidarite.domain.models import TaxBenefit
from noel_solidarite.domain.submission import DonationSubmission, field_errors
from noel_solidarite.domain.tax import GIFTS_PER_EURO, TAX_REDUCTION_RATE, calculate_tax_benefit
from noel_solidarite.infrastructure.clients.intake import DonationIntakeClient
from noel_solidarite.web.confirmation import DonationConfirmation

logger = logging.getLogger(__name__)

TEXT_FIELDS = (
    "donationType",
    "cause",
    "title",
    "lastName",
    "firstName",
    "email",
    "address",
    "addressComplement",
    "zipCode",
    "city",
    "country",
    "phone",
    "paymentMethod",
    "howDidYouKnow",
)
CHECKBOX_FIELDS = ("organization", "coverFees")

PRESET_ACTION_PREFIX = "preset:"
SUBMIT_ACTION = "submit"


def default_values() -> Dict[str, Any]:
    return {
        "donationType": "ponctuel",
        "cause": DEFAULT_CAUSE,
        "country": DEFAULT_COUNTRY,
        "paymentMethod": "card",
        "coverFees": False,
        "organization": False,
        "title": "mr-mme",
    }


def _parse_amount(text: str) -> Optional[float]:
    try:
        value = float(text.strip().replace(",", "."))
    except ValueError:
        return None
    # "nan", "inf" and overflowing literals like "1e400" are not amounts
    return value if math.isfinite(value) else None


def _parse_preset(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


class DonationForm:
    """
    State behind the three-section donation page.

    The amount comes from exactly one of two inputs: a preset button or the
    free-amount field. Whichever the donor touched last wins and clears the
    other.
    """

    def __init__(
        self,
        values: Optional[Mapping[str, Any]] = None,
        tax_rate: float = TAX_REDUCTION_RATE,
        gifts_per_euro: int = GIFTS_PER_EURO,
    ):
        self.values: Dict[str, Any] = default_values()
        if values:
            self.values.update(values)
        self.tax_rate = tax_rate
        self.gifts_per_euro = gifts_per_euro
        self.selected_amount: Optional[int] = None
        self.custom_amount: str = ""
        self.amount: Optional[float] = None
        self.errors: Dict[str, str] = {}
        self.error: Optional[str] = None
        self.is_loading = False
        self.donation_id: Optional[str] = None

    @classmethod
    def from_form_data(
        cls,
        data: Mapping[str, Any],
        tax_rate: float = TAX_REDUCTION_RATE,
        gifts_per_euro: int = GIFTS_PER_EURO,
    ) -> "DonationForm":
        """
        Rebuild the form from a posted page.

        A preset button press arrives as action=preset:<n>. Otherwise a typed
        free amount takes precedence over the remembered preset, since pressing
        a preset empties the free-amount field on the next render.
        """
        form = cls(tax_rate=tax_rate, gifts_per_euro=gifts_per_euro)
        form.update(data)

        action = str(data.get("action") or "")
        custom = str(data.get("customAmount") or "")

        if action.startswith(PRESET_ACTION_PREFIX):
            preset = _parse_preset(action[len(PRESET_ACTION_PREFIX):])
            if preset is not None:
                form.select_preset(preset)
        elif custom.strip():
            form.enter_custom(custom)
        else:
            preset = _parse_preset(data.get("selectedAmount"))
            if preset is not None:
                form.select_preset(preset)

        return form

    def update(self, data: Mapping[str, Any]) -> None:
        """Copy posted field values; unchecked checkboxes are simply absent"""
        for name in TEXT_FIELDS:
            if name in data:
                self.values[name] = data[name]
        for name in CHECKBOX_FIELDS:
            self.values[name] = name in data

    def select_preset(self, value: int) -> None:
        self.selected_amount = value
        self.custom_amount = ""
        self.amount = float(value)

    def enter_custom(self, text: str) -> None:
        self.custom_amount = text
        self.selected_amount = None
        self.amount = _parse_amount(text) if text.strip() else None

    @property
    def tax_benefit(self) -> Optional[TaxBenefit]:
        if not self.amount:
            return None
        return calculate_tax_benefit(self.amount, self.tax_rate)

    def payload(self) -> Dict[str, Any]:
        """Submission fields in wire (camelCase) form"""
        data = dict(self.values)
        if self.amount is not None:
            data["amount"] = self.amount
        return data

    def validate(self) -> Optional[DonationSubmission]:
        """Check the shared schema; on failure fill `errors` with one message per field"""
        try:
            submission = DonationSubmission.model_validate(self.payload())
        except ValidationError as e:
            self.errors = field_errors(e)
            return None
        self.errors = {}
        return submission

    async def submit(self, client: DonationIntakeClient) -> Optional[DonationConfirmation]:
        """
        Validate and send the donation.

        Returns the confirmation on success. Returns None when validation
        blocks submission (see `errors`), when the service or network fails
        (see `error`), or when a submission is already in flight.
        """
        if self.is_loading:
            return None

        submission = self.validate()
        if submission is None:
            return None

        self.is_loading = True
        self.error = None
        try:
            receipt = await client.submit(submission)
        except IntakeServiceError as e:
            logger.warning(f"Donation submission failed: {e.message}", extra={"status_code": e.status_code})
            self.error = e.message
            return None
        finally:
            self.is_loading = False

        self.donation_id = receipt.donation_id
        return DonationConfirmation.from_submission(
            submission,
            receipt.donation_id,
            tax_rate=self.tax_rate,
            gifts_per_euro=self.gifts_per_euro,
        )
