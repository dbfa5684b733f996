from pydantic import BaseModel, ConfigDict, Field

class Identity(BaseModel):
    """Claim carried by a signed token; lives for one request."""
    username: str = Field(strict=True)
    # a string such as "false" is rejected, never read as truthy
    is_admin: bool = Field(False, alias="isAdmin", strict=True)
    model_config = ConfigDict(populate_by_name=True, frozen=True)
