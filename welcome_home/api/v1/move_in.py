"""POST /v1/welcome-home/compute and GET /v1/welcome-home/defaults"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from welcome_home.api.v1.schemas import (
    ComputeResponse,
    ComputedValuesSchema,
    DisplaySchema,
    MonthlyChargeLineSchema,
    WelcomeHomeFormSchema,
)
from welcome_home.api.dependencies import get_id_factory, get_reference_date, get_request_id
from welcome_home.config import settings
from welcome_home.domain.calculations import (
    build_monthly_charge_breakdown,
    compute_all,
    validate_lease_dates,
)
from welcome_home.domain.defaults import IdFactory, create_default_form_data
from welcome_home.domain.models import ComputedValues, WelcomeHomeFormData
from welcome_home.infrastructure.observability.logging import log_computation
from welcome_home.infrastructure.observability.metrics import record_computation
from welcome_home.utils.formatting import format_currency, format_date, format_date_short

router = APIRouter()


def build_display(data: WelcomeHomeFormData, computed: ComputedValues) -> DisplaySchema:
    unit = data.unit
    return DisplaySchema(
        move_in_date=format_date(unit.move_in_date),
        move_in_date_short=format_date_short(unit.move_in_date),
        lease_end_date=format_date(unit.lease_end_date),
        lease_term=f"{computed.lease_term_months} months, {computed.lease_term_days} days",
        total_monthly_charges=format_currency(computed.total_monthly_charges),
        total_monthly_leasing_price=format_currency(computed.total_monthly_leasing_price),
        recurring_concession_amount=format_currency(computed.recurring_concession_amount),
        prorated_concession=format_currency(computed.prorated_concession),
        prorated_total=format_currency(computed.prorated_total),
        next_month_rent=format_currency(computed.next_month_rent),
        total_deposits=format_currency(computed.total_deposits),
        total_non_refundable_fees=format_currency(computed.total_non_refundable_fees),
        subtotal_move_in=format_currency(computed.subtotal_move_in),
        move_in_concession_deduction=format_currency(computed.move_in_concession_deduction),
        total_due_at_move_in=format_currency(computed.total_due_at_move_in),
        holding_deposit_expiry=computed.holding_deposit_expiry,
    )


@router.post("/welcome-home/compute", response_model=ComputeResponse)
def compute_move_in(
    form: WelcomeHomeFormSchema,
    request: Request,
    today: date = Depends(get_reference_date),
):
    """
    Recompute every move-in figure for the submitted form.

    Flow:
    1. Convert the form to domain records
    2. Run the calculator (lease term, proration, concessions, totals)
    3. Build the monthly charges table and lease-date warnings
    4. Format display strings for the documents
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        data = form.to_domain()
        computed = compute_all(data, today=today)
        monthly_charges = build_monthly_charge_breakdown(data, computed.prorate_fraction)
        warnings = validate_lease_dates(data.unit)
        display = build_display(data, computed)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    method = data.property_settings.proration_method.value
    duration_ms = (time.perf_counter() - start_time) * 1000
    record_computation(method, computed.charge_next_month, computed.total_due_at_move_in)
    log_computation(request_id, method, computed.charge_next_month, computed.total_due_at_move_in, duration_ms)

    if warnings:
        logging.warning("Lease date warnings: %s", "; ".join(warnings), extra={"request_id": request_id})

    return ComputeResponse(
        computed=ComputedValuesSchema.from_domain(computed),
        monthly_charges=[MonthlyChargeLineSchema.from_domain(line) for line in monthly_charges],
        warnings=warnings,
        display=display,
    )


@router.get("/welcome-home/defaults", response_model=WelcomeHomeFormSchema)
def get_default_form(
    today: date = Depends(get_reference_date),
    id_factory: IdFactory = Depends(get_id_factory),
):
    """Blank form for a new session: move-in today, default property profile and fees"""
    data = create_default_form_data(today=today, id_factory=id_factory, lease_months=settings.default_lease_months)
    return WelcomeHomeFormSchema.model_validate(data)
