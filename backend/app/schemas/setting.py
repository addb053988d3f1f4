from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SettingUpdate(BaseModel):
    key: str = Field(min_length=1, max_length=100)
    value: str | int | float
    description: Optional[str] = None


class SettingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    value: str
    description: Optional[str] = None
