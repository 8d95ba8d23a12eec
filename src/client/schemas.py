"""API schemas for client requests and responses."""
from pydantic import BaseModel, EmailStr, Field, field_validator


class CreateClientRequest(BaseModel):
    """Request schema for creating a new client."""
    first_name: str = Field(..., min_length=1, description="First name cannot be blank")
    last_name: str = Field(..., min_length=1, description="Last name cannot be blank")
    email: EmailStr = Field(..., description="Email address is required")
    personal_id: str = Field(..., min_length=1, description="Personal identification number")
    mobile_number: str = Field(..., min_length=1, description="Mobile phone number")
    profile_photo: str = Field(default="", description="Path or reference to the profile photo")

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure name fields are not just whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v.strip()


class UpdateClientRequest(CreateClientRequest):
    """Request schema for replacing every field of an existing client."""


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: int
    first_name: str
    last_name: str
    email: str
    personal_id: str
    mobile_number: str
    profile_photo: str

    model_config = {"from_attributes": True}


class SearchParametersResponse(BaseModel):
    """Response schema for a previously executed client search."""
    first_name: str | None = None
    last_name: str | None = None
    page_number: int
    page_size: int

    model_config = {"from_attributes": True}
