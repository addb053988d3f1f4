"""Quotation and line item schemas.

Input models reject negative amounts, an out-of-range VAT percentage and
unknown statuses at construction, before any pricing runs.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.app.schemas.customer import CustomerRead

MAX_VAT_PERCENTAGE = Decimal("20")

# Bounds keep quantity * rate * percentage inside the default 28-digit Decimal context
QUANTITY_DIGITS, QUANTITY_PLACES = 10, 4
RATE_DIGITS, RATE_PLACES = 12, 4
VAT_PERCENTAGE_DIGITS, VAT_PERCENTAGE_PLACES = 5, 2
LINE_VAT_DIGITS, LINE_VAT_PLACES = 28, 12


class QuotationStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    REVISED = "REVISED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class QuotationItemInput(BaseModel):
    """One line as submitted by a client.

    ``sub_total`` is not accepted: it is always ``quantity * rate`` computed
    server-side. ``vat_rate`` is the line's absolute VAT amount; when omitted
    it is derived from the document VAT percentage at entry time.
    """

    scope_of_work: str = Field(min_length=1)
    description: Optional[str] = None
    quantity: Decimal = Field(ge=0, max_digits=QUANTITY_DIGITS, decimal_places=QUANTITY_PLACES)
    rate: Decimal = Field(ge=0, max_digits=RATE_DIGITS, decimal_places=RATE_PLACES)
    vat_rate: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=LINE_VAT_DIGITS, decimal_places=LINE_VAT_PLACES
    )
    sort_order: Optional[int] = Field(default=None, ge=0)

    @field_validator("scope_of_work")
    @classmethod
    def scope_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Scope of work is required")
        return value


class QuotationCreate(BaseModel):
    customer_id: int
    project_name: str = Field(min_length=1, max_length=255)
    site_location: Optional[str] = None
    status: QuotationStatus = QuotationStatus.DRAFT
    vat_percentage: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=MAX_VAT_PERCENTAGE,
        max_digits=VAT_PERCENTAGE_DIGITS,
        decimal_places=VAT_PERCENTAGE_PLACES,
    )
    notes: Optional[str] = None
    terms: Optional[str] = None
    items: List[QuotationItemInput] = Field(min_length=1)


class QuotationUpdate(BaseModel):
    customer_id: Optional[int] = None
    project_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    site_location: Optional[str] = None
    status: Optional[QuotationStatus] = None
    vat_percentage: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=MAX_VAT_PERCENTAGE,
        max_digits=VAT_PERCENTAGE_DIGITS,
        decimal_places=VAT_PERCENTAGE_PLACES,
    )
    notes: Optional[str] = None
    terms: Optional[str] = None
    # Full replacement set; partial item edits must resend every line
    items: Optional[List[QuotationItemInput]] = Field(default=None, min_length=1)


class QuotationItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    scope_of_work: str
    description: Optional[str] = None
    quantity: Decimal
    rate: Decimal
    vat_rate: Decimal
    sub_total: Decimal
    sort_order: int


class QuotationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    quotation_number: str
    customer_id: int
    customer: Optional[CustomerRead] = None
    project_name: str
    site_location: Optional[str] = None
    status: QuotationStatus
    subtotal: Decimal
    vat_percentage: Decimal
    vat_amount: Decimal
    total: Decimal
    notes: Optional[str] = None
    terms: Optional[str] = None
    created_by_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    items: List[QuotationItemRead] = []


class QuotationSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    quotation_number: str
    project_name: str
    customer_name: Optional[str] = None
    status: QuotationStatus
    total: Decimal
    created_at: datetime
