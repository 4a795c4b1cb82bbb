"""GET/POST /donate - server-rendered donation form and confirmation"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from noel_solidarite.api.dependencies import get_intake_client
from noel_solidarite.config import settings
from noel_solidarite.domain.catalog import (
    CAUSE_LABELS,
    DONATION_AMOUNTS,
    HOW_DID_YOU_KNOW,
    PAYMENT_METHOD_LABELS,
    TITLE_LABELS,
)
from noel_solidarite.infrastructure.clients.intake import DonationIntakeClient
from noel_solidarite.web.confirmation import format_euros
from noel_solidarite.web.form import SUBMIT_ACTION, DonationForm

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["euros"] = format_euros

router = APIRouter()


def _render_form(request: Request, form: DonationForm) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "donate.html",
        {
            "form": form,
            "amounts": DONATION_AMOUNTS,
            "causes": CAUSE_LABELS,
            "titles": TITLE_LABELS,
            "payment_methods": PAYMENT_METHOD_LABELS,
            "how_did_you_know": HOW_DID_YOU_KNOW,
        },
    )


@router.get("/donate", response_class=HTMLResponse)
async def donate_page(request: Request):
    """Empty form with campaign defaults"""
    form = DonationForm(tax_rate=settings.tax_reduction_rate, gifts_per_euro=settings.gifts_per_euro)
    return _render_form(request, form)


@router.post("/donate", response_class=HTMLResponse)
async def donate_submit(
    request: Request,
    intake_client: DonationIntakeClient = Depends(get_intake_client),
):
    """
    Handle a posted donation page.

    Preset buttons only re-render the form with the new amount and tax
    preview. The submit button validates, calls the intake API and renders
    either the confirmation or the form with its errors.
    """
    data = await request.form()
    form = DonationForm.from_form_data(
        data,
        tax_rate=settings.tax_reduction_rate,
        gifts_per_euro=settings.gifts_per_euro,
    )

    if data.get("action") != SUBMIT_ACTION:
        return _render_form(request, form)

    confirmation = await form.submit(intake_client)
    if confirmation is None:
        return _render_form(request, form)

    return templates.TemplateResponse(request, "confirmation.html", {"confirmation": confirmation})
