"""Unit tests for the move-in calculator"""

import pytest
from dataclasses import replace
from datetime import date
from welcome_home.domain.calculations import (
    build_monthly_charge_breakdown,
    calculate_holding_deposit_expiry,
    calculate_lease_term_days,
    calculate_lease_term_months,
    calculate_prorate_fraction,
    calculate_prorated_amount,
    calculate_recurring_concession,
    compute_all,
    get_monthly_fees,
    get_one_time_fees,
    get_refundable_deposits,
    round_currency,
    should_charge_next_month,
    validate_lease_dates,
)
from welcome_home.domain.models import (
    ConcessionData,
    DepositData,
    FeeCategory,
    FeeFrequency,
    FeeItem,
    HoldingDepositTimeFrame,
    PropertySettings,
    ProrationMethod,
    UnitDetails,
    WelcomeHomeFormData,
)


def fee(name: str, amount: float, frequency: FeeFrequency) -> FeeItem:
    return FeeItem(id=name, name=name, amount=amount, frequency=frequency, category=FeeCategory.ESSENTIALS)


# Lease term


def test_lease_term_six_months_exact():
    move_in, lease_end = date(2026, 2, 6), date(2026, 8, 6)
    months = calculate_lease_term_months(move_in, lease_end)

    assert months == 6
    assert calculate_lease_term_days(move_in, lease_end, months) == 0


def test_lease_term_end_day_short_of_start_day():
    """Lease end on the 5th does not complete the month started on the 31st"""
    move_in, lease_end = date(2026, 1, 31), date(2026, 3, 5)
    months = calculate_lease_term_months(move_in, lease_end)

    assert months == 1
    # Jan 31 + 1 month rolls to Mar 3, leaving 2 days
    assert calculate_lease_term_days(move_in, lease_end, months) == 2


def test_lease_term_remainder_days():
    move_in, lease_end = date(2026, 4, 16), date(2027, 4, 15)
    months = calculate_lease_term_months(move_in, lease_end)

    assert months == 11
    assert calculate_lease_term_days(move_in, lease_end, months) == 30


def test_lease_term_same_date_is_zero():
    d = date(2026, 2, 6)
    assert calculate_lease_term_months(d, d) == 0
    assert calculate_lease_term_days(d, d, 0) == 0


def test_lease_term_inverted_dates_is_zero():
    move_in, lease_end = date(2026, 8, 6), date(2026, 2, 6)
    assert calculate_lease_term_months(move_in, lease_end) == 0
    assert calculate_lease_term_days(move_in, lease_end, 0) == 0


def test_lease_term_missing_dates_is_zero():
    assert calculate_lease_term_months(None, date(2026, 8, 6)) == 0
    assert calculate_lease_term_months(date(2026, 2, 6), None) == 0
    assert calculate_lease_term_days(None, None, 0) == 0


# Proration


def test_prorate_first_of_month_is_full():
    assert calculate_prorate_fraction(date(2026, 2, 1), ProrationMethod.BY_30_DAY_MONTH) == 1
    assert calculate_prorate_fraction(date(2026, 2, 1), ProrationMethod.BY_CALENDAR_MONTH) == 1


def test_prorate_30_day_month_second_day():
    fraction = calculate_prorate_fraction(date(2026, 2, 2), ProrationMethod.BY_30_DAY_MONTH)
    assert fraction == pytest.approx(29 / 30)


def test_prorate_30_day_month_ignores_real_month_length():
    """February 28th is still 3/30 under the 30-day convention"""
    fraction = calculate_prorate_fraction(date(2026, 2, 28), ProrationMethod.BY_30_DAY_MONTH)
    assert fraction == pytest.approx(3 / 30)


def test_prorate_30_day_month_day_31_is_zero():
    """Day 31 is not clamped; it yields 0/30"""
    fraction = calculate_prorate_fraction(date(2026, 1, 31), ProrationMethod.BY_30_DAY_MONTH)
    assert fraction == 0


def test_prorate_calendar_month_february():
    fraction = calculate_prorate_fraction(date(2026, 2, 15), ProrationMethod.BY_CALENDAR_MONTH)
    assert fraction == 0.5


def test_prorate_calendar_month_31_day_month():
    fraction = calculate_prorate_fraction(date(2026, 1, 31), ProrationMethod.BY_CALENDAR_MONTH)
    assert fraction == pytest.approx(1 / 31)


def test_prorate_missing_move_in_is_zero():
    assert calculate_prorate_fraction(None, ProrationMethod.BY_30_DAY_MONTH) == 0


def test_prorated_amount_half():
    assert calculate_prorated_amount(1000, 0.5) == 500.00


def test_prorated_amount_full_month_unrounded():
    assert calculate_prorated_amount(1000, 1) == 1000
    assert calculate_prorated_amount(1234.567, 1) == 1234.567


def test_prorated_amount_rounds_to_cents():
    assert calculate_prorated_amount(50, 4 / 30) == 6.67


def test_round_currency_half_up():
    """Python's round(0.125, 2) gives 0.12; spreadsheets give 0.13"""
    assert round_currency(0.125) == 0.13
    assert round_currency(2.5) == 2.5


# Concessions


def test_recurring_concession_dollar_amount_wins():
    assert calculate_recurring_concession(2000, 0, 100) == 100
    assert calculate_recurring_concession(2000, 10, 100) == 100


def test_recurring_concession_percentage():
    assert calculate_recurring_concession(2000, 10, 0) == 200


def test_recurring_concession_none():
    assert calculate_recurring_concession(2000, 0, 0) == 0


# Fees


def test_fee_classification_by_frequency():
    fees = [
        fee("Parking", 75, FeeFrequency.PER_MONTH),
        fee("Application Fee", 50, FeeFrequency.ONE_TIME),
        fee("Late Fee", 100, FeeFrequency.PER_OCCURRENCE),
        fee("Key Fob", 25, FeeFrequency.AT_MOVE_IN_ONLY),
        fee("Renewal", 300, FeeFrequency.PER_LEASE),
    ]

    assert [f.name for f in get_monthly_fees(fees)] == ["Parking"]
    assert [f.name for f in get_one_time_fees(fees)] == ["Application Fee", "Key Fob"]


def test_fee_classification_excludes_unpriced():
    fees = [
        fee("Trash Services - Doorstep", 0, FeeFrequency.PER_MONTH),
        fee("Pet Fee", 0, FeeFrequency.ONE_TIME),
        fee("Access Device Deposit (Refundable)", 0, FeeFrequency.ONE_TIME),
    ]

    assert get_monthly_fees(fees) == []
    assert get_one_time_fees(fees) == []
    assert get_refundable_deposits(fees) == []


def test_fee_classification_preserves_order_and_input():
    fees = [
        fee("B", 20, FeeFrequency.PER_MONTH),
        fee("A", 10, FeeFrequency.PER_MONTH),
    ]
    snapshot = list(fees)

    assert [f.name for f in get_monthly_fees(fees)] == ["B", "A"]
    assert fees == snapshot


def test_refundable_deposits_by_name():
    fees = [
        fee("Access Device Deposit (Refundable)", 50, FeeFrequency.ONE_TIME),
        fee("Administrative Fee", 150, FeeFrequency.ONE_TIME),
    ]
    assert [f.name for f in get_refundable_deposits(fees)] == ["Access Device Deposit (Refundable)"]


# Move-in timing


def test_charge_next_month_after_25th():
    assert should_charge_next_month(date(2026, 3, 26), True) is True
    assert should_charge_next_month(date(2026, 3, 25), True) is False


def test_charge_next_month_setting_off():
    assert should_charge_next_month(date(2026, 3, 28), False) is False


def test_charge_next_month_missing_date():
    assert should_charge_next_month(None, True) is False


def test_holding_deposit_expiry_48_hours_over_weekend(reference_date: date):
    """Friday + 2 business days = Tuesday"""
    assert calculate_holding_deposit_expiry(HoldingDepositTimeFrame.HOURS_48, reference_date) == "Feb 10, 2026"


def test_holding_deposit_expiry_72_hours(reference_date: date):
    assert calculate_holding_deposit_expiry(HoldingDepositTimeFrame.HOURS_72, reference_date) == "Feb 11, 2026"


def test_holding_deposit_expiry_midweek():
    wednesday = date(2026, 2, 4)
    assert calculate_holding_deposit_expiry(HoldingDepositTimeFrame.HOURS_48, wednesday) == "Feb 6, 2026"


# Warnings


def test_validate_lease_dates_ok():
    unit = UnitDetails(move_in_date=date(2026, 2, 6), lease_end_date=date(2026, 8, 6))
    assert validate_lease_dates(unit) == []


def test_validate_lease_dates_inverted():
    unit = UnitDetails(move_in_date=date(2026, 8, 6), lease_end_date=date(2026, 2, 6))
    assert validate_lease_dates(unit) == ["Lease end date must be after the move-in date"]


def test_validate_lease_dates_missing():
    assert len(validate_lease_dates(UnitDetails())) == 2


# Aggregation


def test_compute_all_mid_month_scenario(mid_month_form: WelcomeHomeFormData, reference_date: date):
    computed = compute_all(mid_month_form, today=reference_date)

    assert computed.prorate_fraction == 0.5
    assert computed.prorated_rent == 1000
    assert computed.total_monthly_charges == 2050
    assert computed.prorated_total == 1025
    assert computed.total_deposits == 500
    assert computed.total_non_refundable_fees == 150
    assert computed.next_month_rent == 0
    assert computed.charge_next_month is False
    assert computed.subtotal_move_in == 1675
    assert computed.total_due_at_move_in == 1675


def test_compute_all_late_move_in_with_concession_and_holding_credit(reference_date: date):
    data = WelcomeHomeFormData(
        unit=UnitDetails(move_in_date=date(2026, 4, 27), lease_end_date=date(2027, 4, 26)),
        rent=1500.0,
        concessions=ConcessionData(has_concessions=True, recurring_dollar_amount=100.0),
        deposits=DepositData(security_deposit=500.0, holding_deposit=200.0),
        fees=[fee("Parking", 50, FeeFrequency.PER_MONTH)],
        property_settings=PropertySettings(charge_next_month_rent=True),
    )

    computed = compute_all(data, today=reference_date)

    assert computed.prorate_fraction == pytest.approx(4 / 30)
    assert computed.prorated_rent == pytest.approx(200.00)
    assert computed.prorated_total == pytest.approx(206.67)
    assert computed.recurring_concession_amount == 100
    assert computed.total_monthly_leasing_price == 1450
    assert computed.charge_next_month is True
    assert computed.next_month_rent == 1450
    assert computed.prorated_concession == pytest.approx(13.33)
    assert computed.move_in_concession_deduction == pytest.approx(13.33)
    assert computed.subtotal_move_in == pytest.approx(2156.67)
    assert computed.total_due_at_move_in == pytest.approx(1943.34)
    assert computed.paid_to_date == 200


def test_compute_all_disabled_concession_ignores_stale_values(mid_month_form: WelcomeHomeFormData):
    data = replace(
        mid_month_form,
        concessions=ConcessionData(
            has_concessions=False,
            recurring_percentage=10.0,
            recurring_dollar_amount=50.0,
            upfront_amount=500.0,
        ),
    )

    computed = compute_all(data, today=date(2026, 2, 6))

    assert computed.recurring_concession_amount == 0
    assert computed.move_in_concession_deduction == 0
    assert computed.total_due_at_move_in == 1675


def test_compute_all_holding_deposit_not_deducted(mid_month_form: WelcomeHomeFormData):
    data = replace(mid_month_form, deposits=DepositData(security_deposit=500.0, holding_deposit=250.0,
                                                        holding_deposit_deducted_from_move_in=False))

    computed = compute_all(data, today=date(2026, 2, 6))

    assert computed.total_deposits == 500
    assert computed.total_due_at_move_in == 1675
    assert computed.paid_to_date == 250


def test_compute_all_never_negative(mid_month_form: WelcomeHomeFormData):
    data = replace(
        mid_month_form,
        concessions=ConcessionData(has_concessions=True, upfront_amount=5000.0),
        deposits=DepositData(holding_deposit=1000.0),
    )

    computed = compute_all(data, today=date(2026, 2, 6))

    assert computed.total_due_at_move_in == 0


def test_compute_all_missing_dates_degrade_to_zero(reference_date: date):
    data = WelcomeHomeFormData(rent=1800.0)

    computed = compute_all(data, today=reference_date)

    assert computed.lease_term_months == 0
    assert computed.lease_term_days == 0
    assert computed.prorate_fraction == 0
    assert computed.prorated_total == 0
    assert computed.total_monthly_charges == 1800
    assert computed.total_due_at_move_in == 0


def test_compute_all_is_idempotent(mid_month_form: WelcomeHomeFormData, reference_date: date):
    first = compute_all(mid_month_form, today=reference_date)
    second = compute_all(mid_month_form, today=reference_date)

    assert first == second
    assert first.holding_deposit_expiry == "Feb 10, 2026"


def test_monthly_charge_breakdown(mid_month_form: WelcomeHomeFormData):
    data = replace(mid_month_form, pet_rent=40.0)

    lines = build_monthly_charge_breakdown(data, 0.5)

    assert [(line.name, line.monthly, line.prorated) for line in lines] == [
        ("Base Rent", 2000.0, 1000.0),
        ("Pet Rent", 40.0, 20.0),
        ("Pest Control Services", 50.0, 25.0),
    ]


def test_monthly_charge_breakdown_omits_zero_pet_rent(mid_month_form: WelcomeHomeFormData):
    lines = build_monthly_charge_breakdown(mid_month_form, 1.0)
    assert [line.name for line in lines] == ["Base Rent", "Pest Control Services"]
