from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.query import FilterCondition, Logic


class PresetCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    filters: List[FilterCondition] = []
    logic: Logic = "AND"
    is_default: bool = Field(default=False, alias="isDefault")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = str(value or "").strip()
        if not normalized:
            raise ValueError("name must not be empty")
        return normalized


class Preset(PresetCreate):
    id: int
