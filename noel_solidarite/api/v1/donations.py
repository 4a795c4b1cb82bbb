"""POST /api/donations and GET /api/donations/{id} - donation intake endpoints"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from noel_solidarite.api.dependencies import get_donation_repository, get_request_id
from noel_solidarite.api.v1.schemas import (
    DonationCreatedResponse,
    DonationRecordSchema,
    DonorSchema,
    ErrorResponse,
    PaymentSchema,
)
from noel_solidarite.domain.exceptions import DonationNotFoundError
from noel_solidarite.domain.intake import build_donation_record
from noel_solidarite.domain.models import DonationRecord
from noel_solidarite.domain.submission import DonationSubmission
from noel_solidarite.infrastructure.observability.logging import log_donation
from noel_solidarite.infrastructure.observability.metrics import record_donation
from noel_solidarite.infrastructure.storage.repository import DonationRepository

router = APIRouter()


def to_record_schema(record: DonationRecord) -> DonationRecordSchema:
    """Serialise a stored record into its nested donor/payment wire shape"""
    donor = record.donor
    return DonationRecordSchema(
        id=record.id,
        donation_type=record.donation_type,
        amount=record.amount,
        cause=record.cause,
        donor=DonorSchema(
            title=donor.title,
            last_name=donor.last_name,
            first_name=donor.first_name,
            email=donor.email,
            address=donor.address,
            address_complement=donor.address_complement,
            zip_code=donor.zip_code,
            city=donor.city,
            country=donor.country,
            phone=donor.phone,
            organization=donor.organization,
        ),
        payment=PaymentSchema(method=record.payment.method, cover_fees=record.payment.cover_fees),
        how_did_you_know=record.how_did_you_know,
        created_at=record.created_at,
        status=record.status,
    )


@router.post(
    "/donations",
    response_model=DonationCreatedResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_donation(
    submission: DonationSubmission,
    request: Request,
    repository: DonationRepository = Depends(get_donation_repository),
):
    """
    Accept a donation.

    Flow:
    1. Body validated against the shared submission schema (400 on failure,
       see api.errors for the reason precedence)
    2. Record built with a fresh id, createdAt and pending status
    3. Record appended to the store
    4. Full record echoed back with its id
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        record = build_donation_record(submission)
        repository.append(record)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_donation(record.donation_type, record.payment.method, record.amount)
    log_donation(request_id, record.id, record.donation_type, record.cause, record.amount, duration_ms)

    return DonationCreatedResponse(
        success=True,
        message="Donation submitted successfully",
        donation_id=record.id,
        donation=to_record_schema(record),
    )


@router.get(
    "/donations/{donation_id}",
    response_model=DonationRecordSchema,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_donation(
    donation_id: str,
    request: Request,
    repository: DonationRepository = Depends(get_donation_repository),
):
    """Retrieve a stored donation by its reference"""
    try:
        record = repository.get(donation_id)
    except DonationNotFoundError:
        raise HTTPException(status_code=404, detail="Donation not found")
    except Exception as e:
        logging.error(f"Error fetching donation: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    return to_record_schema(record)
