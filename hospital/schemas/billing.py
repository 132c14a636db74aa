from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import Optional, Literal
from hospital.schemas.patient import PatientSummary

BillingStatus = Literal["pending", "paid", "overdue"]


class BillingBase(BaseModel):
    patient_id: str
    amount: float = Field(ge=0)
    description: Optional[str] = None
    status: BillingStatus = "pending"
    due_date: Optional[date] = None
    payment_method: Optional[str] = None
    invoice_number: Optional[str] = None


class BillingCreate(BillingBase):
    class Config:
        extra = "forbid"


class BillingUpdate(BaseModel):
    patient_id: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    status: Optional[BillingStatus] = None
    due_date: Optional[date] = None
    payment_method: Optional[str] = None
    invoice_number: Optional[str] = None

    @field_validator("patient_id", "amount", "status")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value

    class Config:
        extra = "forbid"


class BillingResponse(BillingBase):
    id: str
    created_at: Optional[datetime] = None
    patient: Optional[PatientSummary] = None

    class Config:
        from_attributes = True
