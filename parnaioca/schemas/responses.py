"""
Common response schemas for API endpoints.
"""

from pydantic import BaseModel, Field

from parnaioca.models.user import UserRole


class MessageResponse(BaseModel):
    """Standard response for operations that return a success message."""

    message: str = Field(
        ...,
        description="Success message describing the completed operation",
        examples=["Customer activated successfully"],
    )


class UserRegistrationResponse(BaseModel):
    message: str = Field(..., examples=["User created successfully"])
    user_id: str = Field(..., description="ID of the newly created user")


class SessionResponse(BaseModel):
    """Response schema for /auth/me endpoint."""

    user_id: str
    email: str
    role: UserRole
    is_admin: bool


class PurgeResponse(BaseModel):
    message: str
    deleted: int = Field(..., description="Number of removed rows", examples=[156])
