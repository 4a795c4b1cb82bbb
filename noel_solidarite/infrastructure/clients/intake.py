"""Intake API HTTP client used by the donation pages to submit donations"""

from typing import Any, Dict

import httpx

from noel_solidarite.config import settings
from noel_solidarite.domain.exceptions import IntakeServiceError
from noel_solidarite.domain.models import SubmissionReceipt
from noel_solidarite.domain.submission import DonationSubmission

GENERIC_FAILURE_MESSAGE = "Impossible d'enregistrer votre don pour le moment. Veuillez réessayer."


class DonationIntakeClient:
    """Client for the donation intake API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.api_base_url
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self.transport = transport

    async def submit(self, submission: DonationSubmission) -> SubmissionReceipt:
        """
        POST a validated submission to /api/donations.

        No retry: a failed attempt is reported once and the donor decides
        whether to resubmit.

        Raises:
            IntakeServiceError: On rejection (carrying the service's message),
                timeout, network failure, or an unreadable response
        """
        payload = submission.model_dump(mode="json", by_alias=True)

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.post("/api/donations", json=payload)
                response.raise_for_status()
                data = response.json()

                if not data.get("success"):
                    raise IntakeServiceError(data.get("message") or GENERIC_FAILURE_MESSAGE, response.status_code)

                return SubmissionReceipt(
                    donation_id=data["donationId"],
                    message=data.get("message", ""),
                    donation=data.get("donation") or {},
                )

            except httpx.HTTPStatusError as e:
                raise IntakeServiceError(_service_message(e.response), e.response.status_code) from e
            except httpx.RequestError as e:
                raise IntakeServiceError(GENERIC_FAILURE_MESSAGE) from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                raise IntakeServiceError(GENERIC_FAILURE_MESSAGE) from e


def _service_message(response: httpx.Response) -> str:
    """The service's own error text when it sent one, else the generic fallback"""
    try:
        body: Dict[str, Any] = response.json()
    except ValueError:
        return GENERIC_FAILURE_MESSAGE
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return GENERIC_FAILURE_MESSAGE
