from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from hospital.database import get_db
from hospital.auth import get_current_user
from hospital.models.patient import Patient
from hospital.models.doctor import Doctor
from hospital.models.appointment import Appointment
from hospital.models.billing import Billing
from hospital.models.inventory import InventoryItem
from hospital.schemas.report import DashboardStats

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(db: AsyncSession = Depends(get_db)):
    total_patients = await db.scalar(select(func.count(Patient.id))) or 0
    total_doctors = await db.scalar(select(func.count(Doctor.id))) or 0
    total_appointments = await db.scalar(select(func.count(Appointment.id))) or 0
    pending_appointments = await db.scalar(
        select(func.count(Appointment.id)).where(Appointment.status == "pending")
    ) or 0
    completed_appointments = await db.scalar(
        select(func.count(Appointment.id)).where(Appointment.status == "completed")
    ) or 0
    total_revenue = await db.scalar(
        select(func.coalesce(func.sum(Billing.amount), 0)).where(Billing.status == "paid")
    ) or 0
    low_inventory = await db.scalar(
        select(func.count(InventoryItem.id)).where(InventoryItem.status == "low")
    ) or 0
    out_of_stock = await db.scalar(
        select(func.count(InventoryItem.id)).where(InventoryItem.status == "out")
    ) or 0

    return {
        "total_patients": total_patients,
        "total_doctors": total_doctors,
        "total_appointments": total_appointments,
        "pending_appointments": pending_appointments,
        "completed_appointments": completed_appointments,
        "total_revenue": float(total_revenue),
        "low_inventory": low_inventory,
        "out_of_stock": out_of_stock,
    }
