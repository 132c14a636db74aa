from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, UploadFile, File
from sqlalchemy.ext.asyncio import AsyncSession
from hospital.database import get_db
from hospital.models.user import User
from hospital.schemas.user import AvatarResponse, UserResponse
from hospital.services.avatar_service import avatar_service, UploadRejected
from hospital.auth import get_current_user, UserPrincipal

router = APIRouter()


@router.post("/avatar", response_model=AvatarResponse)
async def upload_avatar(
    current_user: UserPrincipal = Depends(get_current_user),
    avatar: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db),
):
    if avatar is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    user = await db.get(User, current_user.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    try:
        user = await avatar_service.upload(avatar, user, db)
    except UploadRejected as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AvatarResponse(
        message="Avatar uploaded successfully",
        avatar=user.avatar,
        user=UserResponse.model_validate(user),
    )
