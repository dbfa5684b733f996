from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# nested under an organization, which already names the handle
class PositionSummarySchema(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    model_config = ConfigDict(from_attributes=True, **_camel)

class PositionSchema(PositionSummarySchema):
    organization_handle: str

# what clients send
class PositionCreate(BaseModel):
    title: str = Field(min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1.0)
    organization_handle: str = Field(min_length=1, max_length=25)
    model_config = ConfigDict(extra="forbid", **_camel)

# a position cannot move to another organization
class PositionUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1.0)
    model_config = ConfigDict(extra="forbid", **_camel)

    # may be omitted, but not cleared
    @field_validator("title")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("cannot be null")
        return v

class PositionFilter(BaseModel):
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: Optional[bool] = None
    title: Optional[str] = Field(None, min_length=1)
    model_config = ConfigDict(extra="forbid", **_camel)
