"""Domain models - pure Python dataclasses representing the Welcome Home sheet"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class FeeFrequency(str, Enum):
    ONE_TIME = "One Time"
    PER_INSTALLMENT = "Per Installment"
    PER_MONTH = "Per Month"
    PER_QUARTER = "Per Quarter"
    PER_YEAR = "Per Year"
    PER_LEASE = "Per Lease"
    PER_OCCURRENCE = "Per Occurrence"
    AT_MOVE_IN_ONLY = "At Move-In Only"


class FeeCategory(str, Enum):
    ESSENTIALS = "Essentials"
    PERSONAL_ADD_ONS = "Personal Add-Ons"
    SITUATIONAL_FEES = "Situational Fees"
    MOVE_IN_BASICS = "Move-In Basics"


class ProrationMethod(str, Enum):
    BY_30_DAY_MONTH = "By 30-Day Month"
    BY_CALENDAR_MONTH = "By Calendar Month"


class HoldingDepositTimeFrame(str, Enum):
    HOURS_48 = "48 hours"
    HOURS_72 = "72 hours"


class ConcessionType(str, Enum):
    PERCENTAGE = "Percentage"
    DOLLAR_AMOUNT = "Dollar Amount"


class PaymentType(str, Enum):
    CHECK_MONEY_ORDER_CREDIT_DEBIT = "CHECK, eMONEY ORDER, CREDIT, OR DEBIT"
    CASHIERS_CHECK_OR_MONEY_ORDER = "CASHIER'S CHECK OR eMONEY ORDER ONLY"
    CREDIT_OR_DEBIT = "CREDIT OR DEBIT ONLY"
    CREDIT = "CREDIT ONLY"
    DEBIT = "DEBIT ONLY"
    MONEY_ORDER = "eMONEY ORDER ONLY"
    CASHIERS_CHECK = "CASHIER'S CHECK ONLY"
    ALL = "ALL FORMS OF PAYMENT"
    CERTIFIED_FUNDS = "CERTIFIED FUNDS ONLY"
    ECHECK_OR_MONEY_ORDER = "eCHECK OR eMONEY ORDER"


class UtilityBillingTiming(str, Enum):
    UP_FRONT = "Up-front"
    FIRST_FULL_MONTH = "First full month"
    INCLUDED_IN_RENT = "Included in rent"


class AdminFeeTiming(str, Enum):
    UP_FRONT = "Up-front"
    FIRST_FULL_MONTH = "First full month"


@dataclass
class ProspectInfo:
    """Prospective residents and agent (display only)"""

    resident_name_1: str = ""
    resident_name_2: str = ""
    resident_name_3: str = ""
    resident_name_4: str = ""
    phone: str = ""
    email: str = ""
    leasing_agent: str = ""


@dataclass
class UnitDetails:
    """Physical unit plus the two dates that drive lease term and proration"""

    apartment_number: str = ""
    building_number: str = ""
    parking_number: str = ""
    floor_plan_name: str = ""
    bedrooms_baths: str = ""
    square_feet: str = ""
    garage_number: str = ""
    mailbox_number: str = ""
    storage_unit_number: str = ""
    move_in_date: Optional[date] = None
    lease_end_date: Optional[date] = None


@dataclass
class FeeItem:
    """Single fee line item; amount <= 0 means not yet priced"""

    id: str
    name: str
    amount: float
    frequency: FeeFrequency
    category: FeeCategory


@dataclass
class ConcessionData:
    has_concessions: bool = False
    recurring_percentage: float = 0.0
    recurring_dollar_amount: float = 0.0  # wins over recurring_percentage when > 0
    upfront_amount: float = 0.0
    upfront_type: ConcessionType = ConcessionType.DOLLAR_AMOUNT


@dataclass
class DepositData:
    security_deposit: float = 0.0
    pet_deposit: float = 0.0
    holding_deposit: float = 0.0
    holding_deposit_deducted_from_move_in: bool = True


@dataclass
class UtilityProvider:
    type: str  # "Electricity", "Water & Sewer", ...
    provider: str
    phone: str


@dataclass
class PropertySettings:
    """Property profile; only proration, next-month and holding settings affect math"""

    property_name: str = ""
    property_address: str = ""
    property_city_state_zip: str = ""
    property_phone: str = ""
    property_email: str = ""
    property_contact: str = ""

    proration_method: ProrationMethod = ProrationMethod.BY_30_DAY_MONTH
    payment_type: PaymentType = PaymentType.CHECK_MONEY_ORDER_CREDIT_DEBIT
    holding_deposit_time_frame: HoldingDepositTimeFrame = HoldingDepositTimeFrame.HOURS_48
    charge_next_month_rent: bool = True  # move-ins after the 25th
    under_construction: bool = False
    has_different_apt_address: bool = False
    use_yieldstar: bool = False

    property_tax: bool = False
    tax_rate: float = 0.0

    utility_providers: List[UtilityProvider] = field(default_factory=list)
    utilities_up_front_or_first_month: UtilityBillingTiming = UtilityBillingTiming.UP_FRONT
    admin_fee_up_front_or_first_month: AdminFeeTiming = AdminFeeTiming.UP_FRONT

    apartment_amenities: List[str] = field(default_factory=list)
    community_amenities: List[str] = field(default_factory=list)
    leasing_team: List[str] = field(default_factory=list)
    revision_date: str = ""


@dataclass
class WelcomeHomeFormData:
    """Aggregate input record owned by one form session"""

    prospect: ProspectInfo = field(default_factory=ProspectInfo)
    unit: UnitDetails = field(default_factory=UnitDetails)
    rent: float = 0.0
    pet_rent: float = 0.0
    concessions: ConcessionData = field(default_factory=ConcessionData)
    deposits: DepositData = field(default_factory=DepositData)
    fees: List[FeeItem] = field(default_factory=list)
    property_settings: PropertySettings = field(default_factory=PropertySettings)


@dataclass(frozen=True)
class MonthlyChargeLine:
    """One row of the monthly charges table: full and prorated amounts"""

    name: str
    monthly: float
    prorated: float


@dataclass(frozen=True)
class ComputedValues:
    """Derived move-in figures, recomputed from scratch on every edit"""

    lease_term_months: int
    lease_term_days: int
    prorate_fraction: float
    prorated_rent: float
    total_monthly_charges: float  # rent + pet rent + monthly fees, before concession
    recurring_concession_amount: float
    total_monthly_leasing_price: float  # after concession
    prorated_total: float
    prorated_concession: float
    total_deposits: float
    total_non_refundable_fees: float
    subtotal_move_in: float
    move_in_concession_deduction: float
    total_due_at_move_in: float
    charge_next_month: bool
    next_month_rent: float
    holding_deposit_expiry: str
    paid_to_date: float
