"""Pytest fixtures for testing"""

from typing import Any, Dict

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from noel_solidarite.api.dependencies import get_intake_client
from noel_solidarite.api.main import create_app
from noel_solidarite.domain.submission import DonationSubmission
from noel_solidarite.infrastructure.clients.intake import DonationIntakeClient
from noel_solidarite.infrastructure.storage.repository import InMemoryDonationRepository


@pytest.fixture
def repository() -> InMemoryDonationRepository:
    """Fresh, empty donation store"""
    return InMemoryDonationRepository()


@pytest.fixture
def app(repository: InMemoryDonationRepository) -> FastAPI:
    """Application wired to the test store, with the donation pages calling it in-process"""
    app = create_app(repository=repository)

    def override_get_intake_client() -> DonationIntakeClient:
        return DonationIntakeClient(
            base_url="http://testserver",
            transport=httpx.ASGITransport(app=app),
        )

    app.dependency_overrides[get_intake_client] = override_get_intake_client
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def donation_payload() -> Dict[str, Any]:
    """Flat JSON body a donor's browser would post"""
    return {
        "amount": 20,
        "donationType": "ponctuel",
        "cause": "lutte-precarite",
        "title": "mr",
        "lastName": "Dupont",
        "firstName": "Jean",
        "email": "j@x.fr",
        "address": "1 Rue A",
        "zipCode": "75001",
        "city": "Paris",
        "paymentMethod": "card",
        "organization": False,
        "coverFees": False,
    }


@pytest.fixture
def submission(donation_payload: Dict[str, Any]) -> DonationSubmission:
    """Validated submission built from the sample payload"""
    return DonationSubmission.model_validate(donation_payload)


@pytest.fixture
def form_data() -> Dict[str, str]:
    """Fields of a completed donation page, as the browser posts them"""
    return {
        "donationType": "regulier",
        "cause": "noel-pour-tous",
        "title": "mme",
        "lastName": "Martin",
        "firstName": "Claire",
        "email": "claire.martin@exemple.fr",
        "address": "12 avenue des Lilas",
        "addressComplement": "Bâtiment B",
        "zipCode": "69003",
        "city": "Lyon",
        "phone": "",
        "howDidYouKnow": "Presse",
        "paymentMethod": "sepa",
        "coverFees": "on",
        "selectedAmount": "",
        "customAmount": "",
    }
