from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Logic = Literal["AND", "OR"]
Dir = Literal["asc", "desc"]


class FilterCondition(BaseModel):
    field: str
    # Kept as free text: an operator the engine does not know simply never matches.
    operator: str
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def normalize_value(cls, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        if value is None:
            return ""
        return value


class SortSpec(BaseModel):
    field: str
    dir: Dir = "asc"


class PageWindow(BaseModel):
    page: int = 0
    size: int = 50


class RecordQuery(BaseModel):
    filters: List[FilterCondition] = []
    logic: Logic = "AND"
    sort: Optional[SortSpec] = None
    window: PageWindow = PageWindow()


class QueryResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: List[dict]
    total: int
    has_more: bool = Field(alias="hasMore")
