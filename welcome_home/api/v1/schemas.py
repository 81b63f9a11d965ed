"""Pydantic schemas for API request/response validation"""

from dataclasses import asdict
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from welcome_home.domain.models import (
    AdminFeeTiming,
    ComputedValues,
    ConcessionData,
    ConcessionType,
    DepositData,
    FeeCategory,
    FeeFrequency,
    FeeItem,
    HoldingDepositTimeFrame,
    MonthlyChargeLine,
    PaymentType,
    PropertySettings,
    ProrationMethod,
    ProspectInfo,
    UnitDetails,
    UtilityBillingTiming,
    UtilityProvider,
    WelcomeHomeFormData,
)


class ProspectSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    resident_name_1: str = ""
    resident_name_2: str = ""
    resident_name_3: str = ""
    resident_name_4: str = ""
    phone: str = ""
    email: str = ""
    leasing_agent: str = ""


class UnitSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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


class FeeItemSchema(BaseModel):
    """Fee line item; amount <= 0 marks a placeholder left out of every total"""

    model_config = ConfigDict(from_attributes=True)

    id: str = ""
    name: str = ""
    amount: float = 0.0
    frequency: FeeFrequency = FeeFrequency.PER_MONTH
    category: FeeCategory = FeeCategory.ESSENTIALS


class ConcessionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    has_concessions: bool = False
    recurring_percentage: float = Field(0.0, ge=0, le=100)
    recurring_dollar_amount: float = Field(0.0, ge=0)
    upfront_amount: float = Field(0.0, ge=0)
    upfront_type: ConcessionType = ConcessionType.DOLLAR_AMOUNT


class DepositSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    security_deposit: float = Field(0.0, ge=0)
    pet_deposit: float = Field(0.0, ge=0)
    holding_deposit: float = Field(0.0, ge=0)
    holding_deposit_deducted_from_move_in: bool = True


class UtilityProviderSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    provider: str = ""
    phone: str = ""


class PropertySettingsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    property_name: str = ""
    property_address: str = ""
    property_city_state_zip: str = ""
    property_phone: str = ""
    property_email: str = ""
    property_contact: str = ""
    proration_method: ProrationMethod = ProrationMethod.BY_30_DAY_MONTH
    payment_type: PaymentType = PaymentType.CHECK_MONEY_ORDER_CREDIT_DEBIT
    holding_deposit_time_frame: HoldingDepositTimeFrame = HoldingDepositTimeFrame.HOURS_48
    charge_next_month_rent: bool = True
    under_construction: bool = False
    has_different_apt_address: bool = False
    use_yieldstar: bool = False
    property_tax: bool = False
    tax_rate: float = Field(0.0, ge=0)
    utility_providers: List[UtilityProviderSchema] = []
    utilities_up_front_or_first_month: UtilityBillingTiming = UtilityBillingTiming.UP_FRONT
    admin_fee_up_front_or_first_month: AdminFeeTiming = AdminFeeTiming.UP_FRONT
    apartment_amenities: List[str] = []
    community_amenities: List[str] = []
    leasing_team: List[str] = []
    revision_date: str = ""


class WelcomeHomeFormSchema(BaseModel):
    """Full Welcome Home form as edited by the leasing agent"""

    model_config = ConfigDict(from_attributes=True)

    prospect: ProspectSchema = ProspectSchema()
    unit: UnitSchema = UnitSchema()
    rent: float = Field(0.0, ge=0)
    pet_rent: float = Field(0.0, ge=0)
    concessions: ConcessionSchema = ConcessionSchema()
    deposits: DepositSchema = DepositSchema()
    fees: List[FeeItemSchema] = []
    property_settings: PropertySettingsSchema = PropertySettingsSchema()

    def to_domain(self) -> WelcomeHomeFormData:
        settings = self.property_settings
        return WelcomeHomeFormData(
            prospect=ProspectInfo(**self.prospect.model_dump()),
            unit=UnitDetails(**self.unit.model_dump()),
            rent=self.rent,
            pet_rent=self.pet_rent,
            concessions=ConcessionData(**self.concessions.model_dump()),
            deposits=DepositData(**self.deposits.model_dump()),
            fees=[FeeItem(**fee.model_dump()) for fee in self.fees],
            property_settings=PropertySettings(
                **settings.model_dump(exclude={"utility_providers"}),
                utility_providers=[UtilityProvider(**u.model_dump()) for u in settings.utility_providers],
            ),
        )


class ComputedValuesSchema(BaseModel):
    lease_term_months: int
    lease_term_days: int
    prorate_fraction: float
    prorated_rent: float
    total_monthly_charges: float
    recurring_concession_amount: float
    total_monthly_leasing_price: float
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

    @classmethod
    def from_domain(cls, computed: ComputedValues) -> "ComputedValuesSchema":
        return cls(**asdict(computed))


class MonthlyChargeLineSchema(BaseModel):
    name: str
    monthly: float
    prorated: float

    @classmethod
    def from_domain(cls, line: MonthlyChargeLine) -> "MonthlyChargeLineSchema":
        return cls(**asdict(line))


class DisplaySchema(BaseModel):
    """Pre-formatted strings for the rent quote and move-in cost sheet"""

    move_in_date: str
    move_in_date_short: str
    lease_end_date: str
    lease_term: str
    total_monthly_charges: str
    total_monthly_leasing_price: str
    recurring_concession_amount: str
    prorated_concession: str
    prorated_total: str
    next_month_rent: str
    total_deposits: str
    total_non_refundable_fees: str
    subtotal_move_in: str
    move_in_concession_deduction: str
    total_due_at_move_in: str
    holding_deposit_expiry: str


class ComputeResponse(BaseModel):
    """Response for POST /v1/welcome-home/compute"""

    computed: ComputedValuesSchema
    monthly_charges: List[MonthlyChargeLineSchema]
    warnings: List[str]
    display: DisplaySchema


class FeeTemplateSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    default_frequency: FeeFrequency
    category: FeeCategory


class FeeCatalogResponse(BaseModel):
    """Response for GET /v1/fees/catalog"""

    templates: List[FeeTemplateSchema]


class CreateFeeRequest(BaseModel):
    """Request body for POST /v1/fees"""

    name: str = Field(..., min_length=1, description="Fee catalog template name")
    amount: float = Field(0.0, ge=0)
    frequency: Optional[FeeFrequency] = Field(None, description="Overrides the template's default frequency")
