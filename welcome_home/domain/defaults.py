"""Default property profile, fee catalog and blank form factory"""

import uuid
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, List, Optional

from welcome_home.domain.exceptions import UnknownFeeTemplateError
from welcome_home.domain.models import (
    AdminFeeTiming,
    FeeCategory,
    FeeFrequency,
    FeeItem,
    PaymentType,
    PropertySettings,
    ProrationMethod,
    HoldingDepositTimeFrame,
    UnitDetails,
    UtilityBillingTiming,
    UtilityProvider,
    WelcomeHomeFormData,
)
from welcome_home.utils.date_utils import add_months

IdFactory = Callable[[], str]


@dataclass(frozen=True)
class FeeTemplate:
    """Catalog entry used to pre-populate a new fee line item"""

    name: str
    default_frequency: FeeFrequency
    category: FeeCategory


DEFAULT_PROPERTY_SETTINGS = PropertySettings(
    property_name="Beacon 85",
    property_address="85 S Union Blvd",
    property_city_state_zip="Lakewood, CO, 80237",
    property_phone="720-699-0091",
    property_email="beacon85@greystar.com",
    property_contact="Robert Barron",
    proration_method=ProrationMethod.BY_30_DAY_MONTH,
    payment_type=PaymentType.CHECK_MONEY_ORDER_CREDIT_DEBIT,
    holding_deposit_time_frame=HoldingDepositTimeFrame.HOURS_48,
    charge_next_month_rent=True,
    under_construction=False,
    has_different_apt_address=False,
    use_yieldstar=True,
    property_tax=False,
    tax_rate=0.0,
    utility_providers=[
        UtilityProvider("Electricity", "Xcel Energy", "1 (800) 895-4999"),
        UtilityProvider("Phone/Other", "CenturyLink/Comcast", "Ask For Details"),
        UtilityProvider("Water & Sewer", "Conservice Resident Support", "1 (888) 260-7736"),
        UtilityProvider("Renters Insurance", "Assurant Renters Support", "1 (844) 832-2550"),
    ],
    utilities_up_front_or_first_month=UtilityBillingTiming.UP_FRONT,
    admin_fee_up_front_or_first_month=AdminFeeTiming.UP_FRONT,
    apartment_amenities=["Stainless Steel Appliances*", "Plank Flooring*"],
    community_amenities=[
        "Sparkling Resort Style Pool",
        "Outdoor Entertainment",
        "Shopping & Restaurants within Walking Distance",
        "Easy Freeway Access",
    ],
    leasing_team=["Robert Barron", "Shari Stengel", "Miriam Munoz", "Edgar Valenzuela", "Anna Noble"],
    revision_date="02/06/2026",
)

_M = FeeFrequency.PER_MONTH
_ONCE = FeeFrequency.ONE_TIME
_OCC = FeeFrequency.PER_OCCURRENCE
_ESS = FeeCategory.ESSENTIALS
_ADD = FeeCategory.PERSONAL_ADD_ONS
_SIT = FeeCategory.SITUATIONAL_FEES
_BASIC = FeeCategory.MOVE_IN_BASICS

FEE_CATALOG: List[FeeTemplate] = [
    # Essentials
    FeeTemplate("Renters Liability/Content - Property Program", _M, _ESS),
    FeeTemplate("Trash Services - Doorstep", _M, _ESS),
    FeeTemplate("Pest Control Services", _M, _ESS),
    # Personal add-ons
    FeeTemplate("Pet Rent", _M, _ADD),
    FeeTemplate("Pet Rent - Additional Pet", _M, _ADD),
    FeeTemplate("Parking", _M, _ADD),
    FeeTemplate("Parking - Covered", _M, _ADD),
    FeeTemplate("Parking - EV", _M, _ADD),
    FeeTemplate("Parking - Garage", _M, _ADD),
    FeeTemplate("Parking - Reserved", _M, _ADD),
    FeeTemplate("Storage Space Rental", _M, _ADD),
    FeeTemplate("Storage Space - Bicycle", _M, _ADD),
    FeeTemplate("Washer/Dryer Rental", _M, _ADD),
    FeeTemplate("Cable TV and Internet Services", _M, _ADD),
    FeeTemplate("Cable TV Services", _M, _ADD),
    FeeTemplate("Internet Services", _M, _ADD),
    FeeTemplate("Smart Home Services", _M, _ADD),
    FeeTemplate("Furniture Rental", _M, _ADD),
    FeeTemplate("Ceiling Fan", _M, _ADD),
    FeeTemplate("Additional Occupant Fee", _M, _ADD),
    FeeTemplate("Alarm Services", _M, _ADD),
    FeeTemplate("Concierge Services", _M, _ADD),
    FeeTemplate("Media Package", _M, _ADD),
    FeeTemplate("Positive Credit Reporting Services", _M, _ADD),
    # Move-in basics
    FeeTemplate("Application Fee", _ONCE, _BASIC),
    FeeTemplate("Administrative Fee", _ONCE, _BASIC),
    FeeTemplate("Pet Fee", _ONCE, _BASIC),
    FeeTemplate("Pet Fee - Additional Pet", _ONCE, _BASIC),
    FeeTemplate("Access Device - Additional", _ONCE, _BASIC),
    FeeTemplate("Access Device Deposit (Refundable)", _ONCE, _BASIC),
    # Situational
    FeeTemplate("Late Fee", _OCC, _SIT),
    FeeTemplate("Returned Payment Fee (NSF)", _OCC, _SIT),
    FeeTemplate("Early Lease Termination/Cancellation", _OCC, _SIT),
    FeeTemplate("Reletting Fee", _OCC, _SIT),
    FeeTemplate("Insufficient Move-out Notice Fee", _OCC, _SIT),
    FeeTemplate("Lease Violation", _OCC, _SIT),
    FeeTemplate("Month-to-Month Fee", _M, _SIT),
    FeeTemplate("Intra-Community Transfer Fee", _ONCE, _SIT),
    FeeTemplate("Resident Change Fee", _ONCE, _SIT),
    FeeTemplate("Access/Lock Change Fee", _OCC, _SIT),
    FeeTemplate("Access Device - Replacement", _OCC, _SIT),
    FeeTemplate("Access Device - Deactivation", _OCC, _SIT),
    FeeTemplate("Express Move Out", _OCC, _SIT),
    # Utilities
    FeeTemplate("Utility - Electric", _M, _ESS),
    FeeTemplate("Utility - Gas", _M, _ESS),
    FeeTemplate("Utility - Water", _M, _ESS),
    FeeTemplate("Utility - Sewer", _M, _ESS),
    FeeTemplate("Utility - Water/Sewer", _M, _ESS),
    FeeTemplate("Utility - Billing Administrative Fee", _M, _ESS),
    FeeTemplate("Utility Billing Bundle", _M, _ESS),
    FeeTemplate("Common Area - Electric", _M, _ESS),
    FeeTemplate("Common Area - Gas", _M, _ESS),
    FeeTemplate("Common Area - Water/Sewer", _M, _ESS),
    FeeTemplate("Community Amenity Fee", _M, _ESS),
    FeeTemplate("Drainage Fee", _M, _ESS),
    FeeTemplate("Environmental Fee", _M, _ESS),
    FeeTemplate("Trash Services - CA", _M, _ESS),
    FeeTemplate("Trash Administrative Fee", _M, _ESS),
]


def uuid_fee_id(prefix: str = "fee_") -> str:
    return f"{prefix}{uuid.uuid4().hex}"


def find_fee_template(name: str) -> FeeTemplate:
    """Case-insensitive catalog lookup"""
    wanted = name.strip().lower()
    for template in FEE_CATALOG:
        if template.name.lower() == wanted:
            return template
    raise UnknownFeeTemplateError(f"No fee template named '{name}'")


def create_fee_item(
    name: str,
    amount: float,
    frequency: FeeFrequency = FeeFrequency.PER_MONTH,
    category: FeeCategory = FeeCategory.ESSENTIALS,
    id_factory: Optional[IdFactory] = None,
) -> FeeItem:
    """Build a fee line item; ids come from the caller's factory, not a global counter"""
    make_id = id_factory or uuid_fee_id
    return FeeItem(id=make_id(), name=name, amount=amount, frequency=frequency, category=category)


def create_fee_from_template(
    name: str,
    amount: float = 0.0,
    frequency: Optional[FeeFrequency] = None,
    id_factory: Optional[IdFactory] = None,
) -> FeeItem:
    template = find_fee_template(name)
    return create_fee_item(
        template.name,
        amount,
        frequency or template.default_frequency,
        template.category,
        id_factory=id_factory,
    )


def create_default_form_data(
    today: Optional[date] = None,
    id_factory: Optional[IdFactory] = None,
    lease_months: int = 6,
) -> WelcomeHomeFormData:
    """
    Blank form for a new session.

    Move-in defaults to today and lease end to `lease_months` later. The
    property profile is copied so sessions never share mutable settings.
    """
    if today is None:
        today = date.today()

    settings = replace(
        DEFAULT_PROPERTY_SETTINGS,
        utility_providers=list(DEFAULT_PROPERTY_SETTINGS.utility_providers),
        apartment_amenities=list(DEFAULT_PROPERTY_SETTINGS.apartment_amenities),
        community_amenities=list(DEFAULT_PROPERTY_SETTINGS.community_amenities),
        leasing_team=list(DEFAULT_PROPERTY_SETTINGS.leasing_team),
    )

    return WelcomeHomeFormData(
        unit=UnitDetails(move_in_date=today, lease_end_date=add_months(today, lease_months)),
        fees=[
            create_fee_item("Renters Liability/Content - Property Program", 6.06, id_factory=id_factory),
            create_fee_item("Trash Services - Doorstep", 0.0, id_factory=id_factory),
            create_fee_item("Pest Control Services", 0.0, id_factory=id_factory),
        ],
        property_settings=settings,
    )
