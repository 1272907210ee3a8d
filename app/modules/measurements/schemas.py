from pydantic import BaseModel, Field
from typing import List, Literal, Optional

UnitCode = Literal["cm", "ft", "kg", "lb"]


class RulerResponse(BaseModel):
    unit: UnitCode
    quantity: str
    canonical_unit: str
    item_width: int
    max_marks: int
    major_interval: int
    medium_interval: int
    marks: List[float]


class ConvertRequest(BaseModel):
    value: float = Field(allow_inf_nan=False)
    from_unit: UnitCode
    to_unit: UnitCode


class ConvertResponse(BaseModel):
    value: float
    unit: UnitCode


class OffsetRequest(BaseModel):
    value: float = Field(allow_inf_nan=False, description="Canonical value: centimeters or kilograms")
    unit: UnitCode


class OffsetResponse(BaseModel):
    offset: float
    unit: UnitCode


class ScrollRequest(BaseModel):
    offset: float = Field(allow_inf_nan=False)
    unit: UnitCode
    current_value: float = Field(default=0.0, allow_inf_nan=False)


class RulerReading(BaseModel):
    value: float
    unit: UnitCode
    offset: float
    changed: bool = False
    input_text: str
    display: str


class ParseRequest(BaseModel):
    text: str
    unit: UnitCode


class ToggleRequest(BaseModel):
    value: float = Field(allow_inf_nan=False)
    unit: UnitCode
    new_unit: UnitCode
    is_scrolling: bool = False


class ParseResponse(BaseModel):
    value: Optional[float] = None
    valid: bool
