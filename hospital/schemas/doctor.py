from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional


class DoctorBase(BaseModel):
    doctor_number: Optional[str] = None
    first_name: str
    last_name: str
    specialization: str
    phone: Optional[str] = None
    email: Optional[str] = None
    license_number: Optional[str] = None
    department: Optional[str] = None
    experience: Optional[int] = Field(default=None, ge=0)
    avatar: Optional[str] = None


class DoctorCreate(DoctorBase):
    class Config:
        extra = "forbid"


class DoctorUpdate(BaseModel):
    doctor_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    specialization: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    license_number: Optional[str] = None
    department: Optional[str] = None
    experience: Optional[int] = Field(default=None, ge=0)
    avatar: Optional[str] = None

    @field_validator("first_name", "last_name", "specialization")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value

    class Config:
        extra = "forbid"


class DoctorResponse(DoctorBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class DoctorSummary(BaseModel):
    id: str
    doctor_number: Optional[str] = None
    first_name: str
    last_name: str
    specialization: Optional[str] = None
    department: Optional[str] = None

    class Config:
        from_attributes = True
