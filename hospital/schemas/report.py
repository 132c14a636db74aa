from pydantic import BaseModel
from datetime import datetime


class ReportResponse(BaseModel):
    type: str
    start_date: datetime
    end_date: datetime
    total_patients: int
    total_appointments: int
    completed_appointments: int
    new_doctors: int
    revenue: float


class DashboardStats(BaseModel):
    total_patients: int
    total_doctors: int
    total_appointments: int
    pending_appointments: int
    completed_appointments: int
    total_revenue: float
    low_inventory: int
    out_of_stock: int
