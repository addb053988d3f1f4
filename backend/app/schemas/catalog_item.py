"""Catalog item schemas."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.schemas.quotation import RATE_DIGITS, RATE_PLACES


class ItemCategory(str, Enum):
    GLASS = "GLASS"
    ALUMINUM = "ALUMINUM"
    HARDWARE = "HARDWARE"
    LABOR = "LABOR"
    MISC = "MISC"


class CatalogItemCreate(BaseModel):
    category: ItemCategory
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    unit: str = Field(min_length=1, max_length=20)
    default_rate: Decimal = Field(ge=0, max_digits=RATE_DIGITS, decimal_places=RATE_PLACES)
    is_active: bool = True


class CatalogItemUpdate(BaseModel):
    category: Optional[ItemCategory] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    unit: Optional[str] = Field(default=None, min_length=1, max_length=20)
    default_rate: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=RATE_DIGITS, decimal_places=RATE_PLACES
    )
    is_active: Optional[bool] = None


class CatalogItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: ItemCategory
    name: str
    description: Optional[str] = None
    unit: str
    default_rate: Decimal
    is_active: bool
    created_at: datetime
    updated_at: datetime
