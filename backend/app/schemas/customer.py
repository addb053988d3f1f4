"""Customer schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class CustomerBase(BaseModel):
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None

    @field_validator("contact_person", "phone", "email", "address", mode="before")
    @classmethod
    def blank_as_none(cls, value):
        # Forms post "" for untouched optional inputs
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CustomerCreate(CustomerBase):
    company_name: str = Field(min_length=1, max_length=255)


class CustomerUpdate(CustomerBase):
    company_name: Optional[str] = Field(default=None, min_length=1, max_length=255)


class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime
