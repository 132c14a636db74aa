import logging
import os
import time
import uuid
import aiofiles
from typing import Optional
from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from hospital.config import get_settings
from hospital.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

MAX_AVATAR_BYTES = 5 * 1024 * 1024
UPLOAD_URL_PREFIX = "/uploads"


class UploadRejected(Exception):
    pass


class AvatarService:
    async def upload(self, file: UploadFile, user: User, db: AsyncSession) -> User:
        """Store an image under a fresh name and point the user's avatar at it."""
        if not (file.content_type or "").startswith("image/"):
            raise UploadRejected("Only image files are allowed")

        content = await file.read(MAX_AVATAR_BYTES + 1)
        if len(content) > MAX_AVATAR_BYTES:
            raise UploadRejected("File too large")

        filename = self._generate_name(file.filename)
        os.makedirs(settings.upload_dir, exist_ok=True)
        path = os.path.join(settings.upload_dir, filename)
        async with aiofiles.open(path, "wb") as f:
            await f.write(content)

        try:
            user.avatar = f"{UPLOAD_URL_PREFIX}/{filename}"
            await db.commit()
        except SQLAlchemyError:
            # The file is only kept once the user row points at it
            os.remove(path)
            raise
        await db.refresh(user)
        logger.info(f"Stored avatar {filename} ({len(content)} bytes) for user {user.id}")
        return user

    def _generate_name(self, original: Optional[str]) -> str:
        ext = os.path.splitext(original or "")[1].lower()
        # Keep only plain extensions; anything else is dropped
        if not ext[1:].isalnum():
            ext = ""
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex}{ext}"


avatar_service = AvatarService()
