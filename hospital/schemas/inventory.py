from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import Optional, Literal

InventoryStatus = Literal["available", "low", "out"]


class InventoryItemBase(BaseModel):
    item_name: str
    category: Optional[str] = None
    quantity: int = Field(ge=0)
    unit_price: Optional[float] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    expiry_date: Optional[date] = None
    status: InventoryStatus = "available"


class InventoryItemCreate(InventoryItemBase):
    class Config:
        extra = "forbid"


class InventoryItemUpdate(BaseModel):
    item_name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    unit_price: Optional[float] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    expiry_date: Optional[date] = None
    status: Optional[InventoryStatus] = None

    @field_validator("item_name", "quantity", "status")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value

    class Config:
        extra = "forbid"


class InventoryItemResponse(InventoryItemBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
