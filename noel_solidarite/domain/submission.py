"""
Donation submission schema shared by the donation pages and the intake API.

Both sides validate with the same model so the rules cannot drift: the form
turns violations into field-level French messages, the API turns them into a
single rejection reason.
"""

from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from noel_solidarite.domain.catalog import DEFAULT_CAUSE, DEFAULT_COUNTRY

DonationType = Literal["ponctuel", "regulier"]
Cause = Literal[
    "aide-hivernale",
    "femmes-en-fete",
    "kit-scolaire",
    "precarite-menstruelle",
    "noel-pour-tous",
    "lutte-precarite",
]
Title = Literal["mr-mme", "mme", "mlle", "mr"]
PaymentMethod = Literal["card", "sepa", "cheque"]

INVALID_AMOUNT = "Invalid amount"
MISSING_REQUIRED_FIELDS = "Missing required fields"
INVALID_DONATION_DATA = "Invalid donation data"

# Upper bound on a single donation, in euros
MAX_DONATION_AMOUNT = 1_000_000

# Checked in this order by the intake service
REQUIRED_DONOR_FIELDS = ("email", "lastName", "firstName")

FIELD_MESSAGES: Dict[str, str] = {
    "donationType": "Veuillez choisir un type de don",
    "amount": "Le montant doit être supérieur à 0",
    "cause": "Veuillez sélectionner une cause",
    "title": "Veuillez sélectionner une civilité",
    "lastName": "Le nom doit contenir au moins 2 caractères",
    "firstName": "Le prénom doit contenir au moins 2 caractères",
    "email": "Email invalide",
    "address": "Veuillez entrer une adresse valide",
    "zipCode": "Code postal invalide",
    "city": "Veuillez entrer une ville",
    "paymentMethod": "Veuillez choisir une méthode de paiement",
}
DEFAULT_FIELD_MESSAGE = "Valeur invalide"
AMOUNT_TOO_LARGE_MESSAGE = "Le montant ne peut pas dépasser 1 000 000 €"


class DonationSubmission(BaseModel):
    """Donor-authored payload, keyed in camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    # Mon don
    donation_type: DonationType = "ponctuel"
    amount: float = Field(
        ...,
        ge=1,
        le=MAX_DONATION_AMOUNT,
        strict=True,
        allow_inf_nan=False,
        description="Donation amount in euros",
    )
    cause: Cause = DEFAULT_CAUSE

    # Mes coordonnées
    organization: bool = False
    title: Title
    last_name: str = Field(..., min_length=2)
    first_name: str = Field(..., min_length=2)
    email: EmailStr
    address: str = Field(..., min_length=5)
    address_complement: Optional[str] = None
    zip_code: str = Field(..., pattern=r"^[0-9]{5}$")
    city: str = Field(..., min_length=2)
    country: str = DEFAULT_COUNTRY
    phone: Optional[str] = None
    how_did_you_know: Optional[str] = None

    # Mon règlement
    payment_method: PaymentMethod
    cover_fees: bool = False

    @field_validator("address_complement", "phone", "how_did_you_know", mode="before")
    @classmethod
    def blank_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("country", mode="before")
    @classmethod
    def blank_country_as_default(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_COUNTRY
        return value


def _field_name(loc: Sequence[Any]) -> Optional[str]:
    """Field a validation error points at, or None when the whole body is wrong"""
    parts = [part for part in loc if part != "body"]
    return str(parts[0]) if parts else None


def _is_blank(error: Mapping[str, Any]) -> bool:
    if error.get("type") == "missing":
        return True
    value = error.get("input")
    return value is None or (isinstance(value, str) and not value.strip())


def rejection_reason(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Collapse schema violations into the single reason the API reports.

    Precedence:
    1. amount absent, not a number, below 1 or above MAX_DONATION_AMOUNT
       (a missing body counts as a missing amount)
    2. email, lastName or firstName absent or empty
    3. anything else
    """
    errors = list(errors)

    for error in errors:
        name = _field_name(error["loc"])
        if name is None or name == "amount":
            return INVALID_AMOUNT

    for error in errors:
        if _field_name(error["loc"]) in REQUIRED_DONOR_FIELDS and _is_blank(error):
            return MISSING_REQUIRED_FIELDS

    return INVALID_DONATION_DATA


def describe_errors(errors: Iterable[Mapping[str, Any]]) -> List[Dict[str, str]]:
    """Field/message pairs safe to return to API callers"""
    return [
        {"field": _field_name(error["loc"]) or "body", "message": str(error.get("msg", ""))}
        for error in errors
    ]


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Map a validation failure to one French message per offending field"""
    messages: Dict[str, str] = {}
    for error in exc.errors():
        name = _field_name(error["loc"]) or "form"
        if name == "amount" and error.get("type") == "less_than_equal":
            messages.setdefault(name, AMOUNT_TOO_LARGE_MESSAGE)
        messages.setdefault(name, FIELD_MESSAGES.get(name, DEFAULT_FIELD_MESSAGE))
    return messages
