import calendar
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from hospital.database import utcnow
from hospital.models.patient import Patient
from hospital.models.doctor import Doctor
from hospital.models.appointment import Appointment
from hospital.models.billing import Billing

REPORT_PERIODS = ("daily", "weekly", "monthly")


def _one_month_before(moment: datetime) -> datetime:
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def report_window(period: str, now: datetime) -> tuple[datetime, datetime]:
    """[start, end) of the look-back window for a report period."""
    if period == "daily":
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return start, start + timedelta(days=1)
    if period == "weekly":
        return now - timedelta(days=7), now
    if period == "monthly":
        return _one_month_before(now), now
    raise ValueError(f"Unknown report period '{period}'")


class ReportService:
    async def generate(self, period: str, db: AsyncSession, now: Optional[datetime] = None) -> dict:
        start, end = report_window(period, now or utcnow())

        async def count(model, *criteria) -> int:
            query = select(func.count(model.id)).where(
                model.created_at >= start, model.created_at < end, *criteria
            )
            return await db.scalar(query) or 0

        revenue = await db.scalar(
            select(func.coalesce(func.sum(Billing.amount), 0)).where(
                Billing.status == "paid",
                Billing.created_at >= start,
                Billing.created_at < end,
            )
        )

        return {
            "type": period,
            "start_date": start,
            "end_date": end,
            "total_patients": await count(Patient),
            "total_appointments": await count(Appointment),
            "completed_appointments": await count(Appointment, Appointment.status == "completed"),
            "new_doctors": await count(Doctor),
            "revenue": float(revenue or 0),
        }


report_service = ReportService()
