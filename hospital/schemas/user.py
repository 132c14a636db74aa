from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)
    # Anything other than doctor/nurse/patient is registered as patient
    role: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        extra = "forbid"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    class Config:
        extra = "forbid"


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None

    class Config:
        extra = "forbid"


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    avatar: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


class ProfileResponse(BaseModel):
    message: str
    user: UserResponse


class AvatarResponse(BaseModel):
    message: str
    avatar: str
    user: UserResponse
