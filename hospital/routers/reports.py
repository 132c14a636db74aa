from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from hospital.database import get_db
from hospital.auth import get_current_user
from hospital.schemas.report import ReportResponse
from hospital.services.report_service import report_service, REPORT_PERIODS

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/{period}", response_model=ReportResponse)
async def get_report(period: str, db: AsyncSession = Depends(get_db)):
    if period not in REPORT_PERIODS:
        raise HTTPException(status_code=404, detail=f"Unknown report period '{period}'")
    return await report_service.generate(period, db)
