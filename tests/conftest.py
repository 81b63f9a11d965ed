"""Pytest fixtures for testing"""

import itertools
import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient
from welcome_home.api.main import create_app
from welcome_home.domain.models import (
    DepositData,
    FeeCategory,
    FeeFrequency,
    FeeItem,
    PropertySettings,
    ProrationMethod,
    UnitDetails,
    WelcomeHomeFormData,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Deterministic fee id generator owned by the test"""
    counter = itertools.count(1)
    return lambda: f"fee_{next(counter)}"


@pytest.fixture
def reference_date() -> date:
    """Friday, February 6, 2026"""
    return date(2026, 2, 6)


@pytest.fixture
def mid_month_form() -> WelcomeHomeFormData:
    """$2000 rent, move-in on the 16th of a 30-day month, one monthly and one one-time fee"""
    return WelcomeHomeFormData(
        unit=UnitDetails(
            apartment_number="1204",
            move_in_date=date(2026, 4, 16),
            lease_end_date=date(2027, 4, 15),
        ),
        rent=2000.0,
        pet_rent=0.0,
        deposits=DepositData(security_deposit=500.0, holding_deposit_deducted_from_move_in=False),
        fees=[
            FeeItem("fee_1", "Pest Control Services", 50.0, FeeFrequency.PER_MONTH, FeeCategory.ESSENTIALS),
            FeeItem("fee_2", "Administrative Fee", 150.0, FeeFrequency.ONE_TIME, FeeCategory.MOVE_IN_BASICS),
        ],
        property_settings=PropertySettings(
            proration_method=ProrationMethod.BY_30_DAY_MONTH,
            charge_next_month_rent=False,
        ),
    )
