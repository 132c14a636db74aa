from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional


class DepartmentBase(BaseModel):
    name: str
    description: Optional[str] = None
    head_doctor: Optional[str] = None
    staff_count: Optional[int] = Field(default=None, ge=0)


class DepartmentCreate(DepartmentBase):
    class Config:
        extra = "forbid"


class DepartmentUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    head_doctor: Optional[str] = None
    staff_count: Optional[int] = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value

    class Config:
        extra = "forbid"


class DepartmentResponse(DepartmentBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
