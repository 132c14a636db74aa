from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional, Literal
from hospital.schemas.patient import PatientSummary
from hospital.schemas.doctor import DoctorSummary

AppointmentStatus = Literal["pending", "confirmed", "completed", "cancelled"]
AppointmentPriority = Literal["low", "medium", "high"]


class AppointmentBase(BaseModel):
    patient_id: str
    doctor_id: str
    appointment_date: datetime
    status: AppointmentStatus = "pending"
    reason: Optional[str] = None
    notes: Optional[str] = None
    priority: AppointmentPriority = "medium"


class AppointmentCreate(AppointmentBase):
    class Config:
        extra = "forbid"


class AppointmentUpdate(BaseModel):
    patient_id: Optional[str] = None
    doctor_id: Optional[str] = None
    appointment_date: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    reason: Optional[str] = None
    notes: Optional[str] = None
    priority: Optional[AppointmentPriority] = None

    @field_validator("patient_id", "doctor_id", "appointment_date", "status", "priority")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value

    class Config:
        extra = "forbid"


class AppointmentResponse(AppointmentBase):
    id: str
    created_at: Optional[datetime] = None
    patient: Optional[PatientSummary] = None
    doctor: Optional[DoctorSummary] = None

    class Config:
        from_attributes = True
