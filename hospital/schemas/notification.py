from pydantic import BaseModel
from datetime import datetime
from typing import Optional, Literal

NotificationType = Literal["info", "warning", "success", "error"]


class NotificationCreate(BaseModel):
    title: str
    message: str
    type: NotificationType = "info"

    class Config:
        extra = "forbid"


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    read: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
