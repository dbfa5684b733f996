from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from position.schema import PositionSummarySchema

# wire names are camelCase (numEmployees), python names snake_case
_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class OrganizationSchema(BaseModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None
    model_config = ConfigDict(from_attributes=True, **_camel)

class OrganizationDetailSchema(OrganizationSchema):
    positions: list[PositionSummarySchema] = []

# what clients send
class OrganizationCreate(BaseModel):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None
    model_config = ConfigDict(extra="forbid", **_camel)

# handle is immutable
class OrganizationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None
    model_config = ConfigDict(extra="forbid", **_camel)

    # may be omitted, but not cleared
    @field_validator("name", "description")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("cannot be null")
        return v

class OrganizationFilter(BaseModel):
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)
    name: Optional[str] = Field(None, min_length=1)
    model_config = ConfigDict(extra="forbid", **_camel)
