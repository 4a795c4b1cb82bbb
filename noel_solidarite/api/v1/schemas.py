"""Pydantic schemas for API responses (requests use the shared DonationSubmission)"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from noel_solidarite.domain.models import DonationStatus


class CamelModel(BaseModel):
    """Response model serialised with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DonorSchema(CamelModel):
    """Donor block of a stored donation"""

    title: str
    last_name: str
    first_name: str
    email: str
    address: str
    address_complement: Optional[str] = None
    zip_code: str
    city: str
    country: str
    phone: Optional[str] = None
    organization: bool


class PaymentSchema(CamelModel):
    """Payment preference block of a stored donation"""

    method: str
    cover_fees: bool


class DonationRecordSchema(CamelModel):
    """Response for GET /api/donations/{id}"""

    id: str
    donation_type: str
    amount: float
    cause: str
    donor: DonorSchema
    payment: PaymentSchema
    how_did_you_know: Optional[str] = None
    created_at: datetime
    status: DonationStatus


class DonationCreatedResponse(CamelModel):
    """Response for POST /api/donations"""

    success: bool = True
    message: str
    donation_id: str
    donation: DonationRecordSchema


class DonationTypeBreakdown(CamelModel):
    """Donation count per donation type"""

    ponctuel: int
    regulier: int


class StatsResponse(CamelModel):
    """Response for GET /api/stats"""

    total_donations: int
    total_amount: float
    average_donation: float
    by_type: DonationTypeBreakdown
    by_cause: Dict[str, int]


class HealthResponse(BaseModel):
    """Response for GET /api/health"""

    status: str
    timestamp: str
    service: str


class ErrorResponse(BaseModel):
    """Body of every API error"""

    error: str
    details: Optional[List[Dict[str, str]]] = None
