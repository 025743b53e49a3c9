from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FarmProfileUpdate(BaseModel):
    farm_name: str | None = None
    city: str | None = None
    country: str | None = None
    contact: str | None = None
    email: str | None = None


class FarmProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    farm_name: str
    city: str
    country: str
    contact: str
    email: str | None
    has_details: bool


class PasskeyChange(BaseModel):
    new_passkey: str = Field(pattern=r"^\d{4}$")
