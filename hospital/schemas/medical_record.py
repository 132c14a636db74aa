from pydantic import BaseModel, field_validator
from datetime import date, datetime
from typing import Optional
from hospital.schemas.patient import PatientSummary
from hospital.schemas.doctor import DoctorSummary


class MedicalRecordBase(BaseModel):
    patient_id: str
    doctor_id: str
    diagnosis: str
    prescription: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None
    follow_up_date: Optional[date] = None
    attachments: list[str] = []


class MedicalRecordCreate(MedicalRecordBase):
    class Config:
        extra = "forbid"


class MedicalRecordUpdate(BaseModel):
    patient_id: Optional[str] = None
    doctor_id: Optional[str] = None
    diagnosis: Optional[str] = None
    prescription: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None
    follow_up_date: Optional[date] = None
    attachments: Optional[list[str]] = None

    @field_validator("patient_id", "doctor_id", "diagnosis", "attachments")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value

    class Config:
        extra = "forbid"


class MedicalRecordResponse(MedicalRecordBase):
    id: str
    created_at: Optional[datetime] = None
    patient: Optional[PatientSummary] = None
    doctor: Optional[DoctorSummary] = None

    class Config:
        from_attributes = True
