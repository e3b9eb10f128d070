from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from school_api.schemas.base_schema import ApiModel, RecordResponse


class UserBase(ApiModel):
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserCreate(UserBase):
    password: str = Field(..., min_length=1)


class UserUpdate(ApiModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserResponse(RecordResponse):
    """Public view of a user. The password hash is never included."""

    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginRequest(ApiModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
