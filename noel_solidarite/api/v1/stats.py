"""GET /api/stats - aggregate donation statistics"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from noel_solidarite.api.dependencies import get_donation_repository, get_request_id
from noel_solidarite.api.v1.schemas import DonationTypeBreakdown, ErrorResponse, StatsResponse
from noel_solidarite.infrastructure.storage.repository import DonationRepository

router = APIRouter()


@router.get("/stats", response_model=StatsResponse, responses={500: {"model": ErrorResponse}})
async def get_stats(
    request: Request,
    repository: DonationRepository = Depends(get_donation_repository),
):
    """
    Summarise every stored donation.

    Returns:
        Count, total, mean (to the cent), and counts per type and per cause.
        Recomputed on each call, nothing is cached.
    """
    try:
        stats = repository.aggregate()
    except Exception as e:
        logging.error(f"Error fetching stats: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    return StatsResponse(
        total_donations=stats.total_donations,
        total_amount=stats.total_amount,
        average_donation=stats.average_donation,
        by_type=DonationTypeBreakdown(
            ponctuel=stats.by_type.get("ponctuel", 0),
            regulier=stats.by_type.get("regulier", 0),
        ),
        by_cause=stats.by_cause,
    )
