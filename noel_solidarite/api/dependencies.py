"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from noel_solidarite.infrastructure.clients.intake import DonationIntakeClient
from noel_solidarite.infrastructure.storage.repository import DonationRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_donation_repository(request: Request) -> DonationRepository:
    """Provide the donation store the application was created with"""
    return request.app.state.donation_repository


def get_intake_client() -> DonationIntakeClient:
    """Provide intake API client instance for the donation pages"""
    return DonationIntakeClient()
