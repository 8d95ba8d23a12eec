"""Domain models used in business logic."""
from typing import Any

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

PERSONAL_ID_LENGTH = 11


class _ValueObject(BaseModel):
    """
    Immutable wrapper around a single validated string.

    Accepts the raw string positionally (``Email("a@b.com")``) or as an
    already-wrapped value, and compares by value.
    """
    value: str

    model_config = {"frozen": True}

    def __init__(self, value: Any = None, /, **data: Any) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def wrap_raw_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        return data

    def __str__(self) -> str:
        return self.value


class Email(_ValueObject):
    """Email address, validated on construction."""
    value: EmailStr = Field(..., description="Email address")


class PersonalId(_ValueObject):
    """National personal identifier: a fixed-length string of ASCII digits."""
    value: str = Field(..., description="Personal identification number")

    @field_validator("value")
    @classmethod
    def validate_digits(cls, v: str) -> str:
        if len(v) != PERSONAL_ID_LENGTH or not (v.isascii() and v.isdigit()):
            raise ValueError(f"Personal ID must be exactly {PERSONAL_ID_LENGTH} digits")
        return v


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: int | None = Field(default=None, description="Storage-assigned client ID")
    first_name: str = Field(..., min_length=1, description="First name cannot be blank")
    last_name: str = Field(..., min_length=1, description="Last name cannot be blank")
    email: Email = Field(..., description="Email address is required")
    personal_id: PersonalId = Field(..., description="Personal ID is required")
    mobile_number: str = Field(..., description="Mobile phone number")
    profile_photo: str = Field(..., description="Path or reference to the profile photo")

    model_config = {"from_attributes": True, "validate_assignment": True}


class SearchParameters(BaseModel):
    """Filter and paging arguments of a single client search."""
    first_name: str | None = None
    last_name: str | None = None
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)

    model_config = {"frozen": True}
