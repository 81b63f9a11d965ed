"""Welcome Home move-in calculator - lease term, proration, concessions and totals"""

import math
from datetime import date
from typing import List, Optional

from welcome_home.domain.models import (
    ComputedValues,
    FeeFrequency,
    FeeItem,
    HoldingDepositTimeFrame,
    MonthlyChargeLine,
    ProrationMethod,
    UnitDetails,
    WelcomeHomeFormData,
)
from welcome_home.utils.date_utils import add_business_days, add_months, days_in_month
from welcome_home.utils.formatting import format_expiry_date

NEXT_MONTH_RENT_CUTOFF_DAY = 25
ONE_TIME_FREQUENCIES = (FeeFrequency.ONE_TIME, FeeFrequency.AT_MOVE_IN_ONLY)


def round_currency(value: float) -> float:
    """Round half-up to cents (spreadsheet ROUND, not banker's rounding)"""
    return math.floor(value * 100 + 0.5) / 100


# Lease term


def calculate_lease_term_months(move_in: Optional[date], lease_end: Optional[date]) -> int:
    """
    Whole months between move-in and lease end (DATEDIF "M").

    The calendar-month difference is reduced by one when the lease end's
    day-of-month falls short of the move-in's day-of-month.
    """
    if move_in is None or lease_end is None or lease_end <= move_in:
        return 0

    months = (lease_end.year - move_in.year) * 12 + (lease_end.month - move_in.month)
    if lease_end.day < move_in.day:
        months -= 1
    return max(0, months)


def calculate_lease_term_days(move_in: Optional[date], lease_end: Optional[date], months: int) -> int:
    """Days left over after adding `months` whole months to move-in"""
    if move_in is None or lease_end is None or lease_end <= move_in:
        return 0

    after_months = add_months(move_in, months)
    return max(0, (lease_end - after_months).days)


# Proration


def calculate_prorate_fraction(move_in: Optional[date], method: ProrationMethod) -> float:
    """
    Fraction of the first month's charges owed for a partial month.

    Methods:
    - By 30-Day Month: DAYS360 convention, every month is 30 days long.
      Day 2 = 29/30, day 28 = 3/30, day 31 = 0/30 (no clamping).
    - By Calendar Month: remaining days over the real length of the month.

    A move-in on the 1st always owes the full month. No move-in date owes nothing.
    """
    if move_in is None:
        return 0.0

    day = move_in.day
    if day == 1:
        return 1.0

    if method == ProrationMethod.BY_30_DAY_MONTH:
        remaining = 30 - (day - 1)
        return remaining / 30

    month_length = days_in_month(move_in.year, move_in.month)
    return (month_length - day + 1) / month_length


def calculate_prorated_amount(amount: float, prorate_fraction: float) -> float:
    if prorate_fraction >= 1:
        return amount
    return round_currency(amount * prorate_fraction)


# Concessions


def calculate_recurring_concession(rent: float, percentage: float, dollar_amount: float) -> float:
    """Monthly concession; a dollar amount overrides any percentage"""
    if dollar_amount > 0:
        return dollar_amount
    if percentage > 0:
        return round_currency(rent * (percentage / 100))
    return 0.0


# Fees


def get_monthly_fees(fees: List[FeeItem]) -> List[FeeItem]:
    return [f for f in fees if f.amount > 0 and f.frequency == FeeFrequency.PER_MONTH]


def get_one_time_fees(fees: List[FeeItem]) -> List[FeeItem]:
    return [f for f in fees if f.amount > 0 and f.frequency in ONE_TIME_FREQUENCIES]


def get_refundable_deposits(fees: List[FeeItem]) -> List[FeeItem]:
    return [f for f in fees if f.amount > 0 and "refundable" in f.name.lower()]


def build_monthly_charge_breakdown(
    data: WelcomeHomeFormData, prorate_fraction: float
) -> List[MonthlyChargeLine]:
    """Rows of the monthly charges table: base rent, pet rent, then priced monthly fees"""
    lines = [
        MonthlyChargeLine(
            name="Base Rent",
            monthly=data.rent,
            prorated=calculate_prorated_amount(data.rent, prorate_fraction),
        )
    ]
    if data.pet_rent > 0:
        lines.append(
            MonthlyChargeLine(
                name="Pet Rent",
                monthly=data.pet_rent,
                prorated=calculate_prorated_amount(data.pet_rent, prorate_fraction),
            )
        )
    for fee in get_monthly_fees(data.fees):
        lines.append(
            MonthlyChargeLine(
                name=fee.name,
                monthly=fee.amount,
                prorated=calculate_prorated_amount(fee.amount, prorate_fraction),
            )
        )
    return lines


# Move-in timing


def should_charge_next_month(move_in: Optional[date], charge_next_month_rent: bool) -> bool:
    """Late move-ins (after the 25th) also pay the following month up front"""
    if not charge_next_month_rent or move_in is None:
        return False
    return move_in.day > NEXT_MONTH_RENT_CUTOFF_DAY


def calculate_holding_deposit_expiry(
    time_frame: HoldingDepositTimeFrame, today: Optional[date] = None
) -> str:
    """
    Date the holding deposit lapses, counted in business days from `today`.

    48 hours = 2 business days, 72 hours = 3 business days. Weekends are
    skipped and today itself never counts.

    Example:
        Friday Feb 6, 2026 + 48 hours -> "Feb 10, 2026"
    """
    if today is None:
        today = date.today()

    hours = 72 if time_frame == HoldingDepositTimeFrame.HOURS_72 else 48
    business_days = math.ceil(hours / 24)
    return format_expiry_date(add_business_days(today, business_days))


def validate_lease_dates(unit: UnitDetails) -> List[str]:
    """User-facing warnings for incomplete or inverted lease dates; never raises"""
    warnings = []
    if unit.move_in_date is None:
        warnings.append("Move-in date is missing")
    if unit.lease_end_date is None:
        warnings.append("Lease end date is missing")
    if (
        unit.move_in_date is not None
        and unit.lease_end_date is not None
        and unit.lease_end_date <= unit.move_in_date
    ):
        warnings.append("Lease end date must be after the move-in date")
    return warnings


# Aggregation


def compute_all(data: WelcomeHomeFormData, today: Optional[date] = None) -> ComputedValues:
    """
    Main entry point: derive every move-in figure from the form data.

    Flow:
    1. Lease term and proration fraction from the unit dates
    2. Gross monthly charges, recurring concession, net monthly price
    3. Prorated first-month charges and prorated concession
    4. Next month's rent for late move-ins
    5. Deposits and one-time fees into the move-in subtotal
    6. Subtract concessions and holding-deposit credit, floored at zero

    Pure apart from `today`, which only feeds the holding-deposit expiry.
    """
    unit = data.unit
    settings = data.property_settings
    concessions = data.concessions
    deposits = data.deposits

    lease_term_months = calculate_lease_term_months(unit.move_in_date, unit.lease_end_date)
    lease_term_days = calculate_lease_term_days(unit.move_in_date, unit.lease_end_date, lease_term_months)

    prorate_fraction = calculate_prorate_fraction(unit.move_in_date, settings.proration_method)
    prorated_rent = calculate_prorated_amount(data.rent, prorate_fraction)

    monthly_fees = get_monthly_fees(data.fees)
    monthly_fees_total = sum(f.amount for f in monthly_fees)
    total_monthly_charges = data.rent + data.pet_rent + monthly_fees_total

    recurring_concession_amount = (
        calculate_recurring_concession(
            data.rent, concessions.recurring_percentage, concessions.recurring_dollar_amount
        )
        if concessions.has_concessions
        else 0.0
    )
    total_monthly_leasing_price = total_monthly_charges - recurring_concession_amount

    # Gross charges are prorated; the concession is prorated on its own below
    prorated_total = (
        prorated_rent
        + calculate_prorated_amount(data.pet_rent, prorate_fraction)
        + sum(calculate_prorated_amount(f.amount, prorate_fraction) for f in monthly_fees)
    )
    prorated_concession = calculate_prorated_amount(recurring_concession_amount, prorate_fraction)

    charge_next_month = should_charge_next_month(unit.move_in_date, settings.charge_next_month_rent)
    next_month_rent = total_monthly_leasing_price if charge_next_month else 0.0

    # Holding deposit is a credit, not part of the deposit subtotal
    total_deposits = deposits.security_deposit + deposits.pet_deposit
    total_non_refundable_fees = sum(f.amount for f in get_one_time_fees(data.fees))

    subtotal_move_in = prorated_total + next_month_rent + total_deposits + total_non_refundable_fees

    move_in_concession_deduction = (
        prorated_concession + (concessions.upfront_amount or 0.0)
        if concessions.has_concessions
        else 0.0
    )
    holding_deposit_credit = (
        deposits.holding_deposit if deposits.holding_deposit_deducted_from_move_in else 0.0
    )
    total_due_at_move_in = max(0.0, subtotal_move_in - move_in_concession_deduction - holding_deposit_credit)

    return ComputedValues(
        lease_term_months=lease_term_months,
        lease_term_days=lease_term_days,
        prorate_fraction=prorate_fraction,
        prorated_rent=prorated_rent,
        total_monthly_charges=total_monthly_charges,
        recurring_concession_amount=recurring_concession_amount,
        total_monthly_leasing_price=total_monthly_leasing_price,
        prorated_total=prorated_total,
        prorated_concession=prorated_concession,
        total_deposits=total_deposits,
        total_non_refundable_fees=total_non_refundable_fees,
        subtotal_move_in=subtotal_move_in,
        move_in_concession_deduction=move_in_concession_deduction,
        total_due_at_move_in=total_due_at_move_in,
        charge_next_month=charge_next_month,
        next_month_rent=next_month_rent,
        holding_deposit_expiry=calculate_holding_deposit_expiry(settings.holding_deposit_time_frame, today),
        paid_to_date=deposits.holding_deposit,
    )
