from pydantic import BaseModel, field_validator
from datetime import date, datetime
from typing import Optional


class PatientBase(BaseModel):
    patient_number: Optional[str] = None
    first_name: str
    last_name: str
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    medical_history: Optional[str] = None
    blood_type: Optional[str] = None
    allergies: Optional[str] = None
    avatar: Optional[str] = None


class PatientCreate(PatientBase):
    class Config:
        extra = "forbid"


class PatientUpdate(BaseModel):
    patient_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    medical_history: Optional[str] = None
    blood_type: Optional[str] = None
    allergies: Optional[str] = None
    avatar: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value

    class Config:
        extra = "forbid"


class PatientResponse(PatientBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PatientSummary(BaseModel):
    """Embedded snapshot of a patient on appointments, records and bills."""
    id: str
    patient_number: Optional[str] = None
    first_name: str
    last_name: str
    phone: Optional[str] = None
    email: Optional[str] = None

    class Config:
        from_attributes = True
