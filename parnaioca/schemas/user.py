from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from parnaioca.models.user import UserRole


class SessionContext(BaseModel):
    """Identity and role of the caller, fixed when the session was issued."""

    user_id: str
    email: str
    role: UserRole

    class Config:
        frozen = True

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class UserBase(BaseModel):
    email: EmailStr
    full_name: str = Field(..., min_length=2)
    role: UserRole = UserRole.STAFF
    is_active: bool = True


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)


class User(UserBase):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str
    role: Optional[UserRole] = None


class LoginRequest(BaseModel):
    email: str
    password: str
