import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from hospital.database import get_db
from hospital.models.user import User
from hospital.schemas.user import (
    RegisterRequest, LoginRequest, ProfileUpdate, UserResponse, AuthResponse, ProfileResponse,
)
from hospital.auth import (
    REGISTRABLE_ROLES, UserPrincipal, create_token, get_current_user, hash_password, verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(data: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Public sign-up. Never creates an admin."""
    role = data.role if data.role in REGISTRABLE_ROLES else "patient"

    existing = await db.scalar(select(User).where(User.email == data.email))
    if existing:
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        name=data.name,
        email=data.email,
        password_hash=hash_password(data.password),
        role=role,
        phone=data.phone,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        await db.rollback()
        raise HTTPException(status_code=400, detail="User already exists")
    await db.refresh(user)

    logger.info(f"Registered user {user.id} with role {user.role}")
    return AuthResponse(
        message="User registered successfully",
        token=create_token(user.id, user.email, user.role),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await db.scalar(select(User).where(User.email == data.email))
    if not user or not verify_password(data.password, user.password_hash):
        logger.warning("Login failed: invalid credentials")
        raise HTTPException(status_code=400, detail="Invalid credentials")

    logger.info(f"Login successful for user {user.id}")
    return AuthResponse(
        message="Login successful",
        token=create_token(user.id, user.email, user.role),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
async def me(
    current_user: UserPrincipal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    user = await db.get(User, current_user.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    data: ProfileUpdate,
    current_user: UserPrincipal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    user = await db.get(User, current_user.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    for key, value in data.model_dump(exclude_unset=True).items():
        if key == "name" and value is None:
            continue
        setattr(user, key, value)

    await db.flush()
    await db.refresh(user)
    return ProfileResponse(message="Profile updated successfully", user=UserResponse.model_validate(user))
