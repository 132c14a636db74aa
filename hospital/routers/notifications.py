from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from hospital.database import get_db
from hospital.models.notification import Notification
from hospital.schemas.notification import NotificationCreate, NotificationResponse
from hospital.auth import get_current_user, UserPrincipal

router = APIRouter()


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    current_user: UserPrincipal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Notification)
        .where(Notification.user_id == current_user.user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    return [NotificationResponse.model_validate(n) for n in result.scalars().all()]


@router.post("", response_model=NotificationResponse, status_code=201)
async def create_notification(
    data: NotificationCreate,
    current_user: UserPrincipal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    notification = Notification(user_id=current_user.user_id, **data.model_dump())
    db.add(notification)
    await db.flush()
    await db.refresh(notification)
    return NotificationResponse.model_validate(notification)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    current_user: UserPrincipal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    notification = await db.get(Notification, notification_id)
    # Other users' notifications are indistinguishable from missing ones
    if not notification or notification.user_id != current_user.user_id:
        raise HTTPException(status_code=404, detail="Notification not found")

    notification.read = True
    await db.flush()
    await db.refresh(notification)
    return NotificationResponse.model_validate(notification)
