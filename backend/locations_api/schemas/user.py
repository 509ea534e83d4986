"""User schemas"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List


class LocationResponse(BaseModel):
    """Schema for a saved location"""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    """
    Schema for user response

    Deliberately has no password field, so the stored hash can never be
    serialized whichever route returns a user.
    """

    id: str
    username: str
    locations: List[LocationResponse] = []
    metric: bool = False

    model_config = ConfigDict(from_attributes=True)


class LocationCreate(BaseModel):
    """Schema for adding a location"""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        # Location names are not credentials, so they are trimmed silently
        # before the length bounds apply
        if isinstance(value, str):
            return value.strip()
        return value


class LocationDelete(BaseModel):
    """Schema for removing a location"""

    location_id: str = Field(..., alias="locationId")

    model_config = ConfigDict(populate_by_name=True)


class MetricUpdate(BaseModel):
    """Schema for setting the unit preference"""

    metric: bool
