"""
Auth module: password hashing, JWT creation/validation, the get_current_user
FastAPI dependency and the require_roles role gate.

Every protected route declares the auth dependency ahead of get_db, so a
request without a valid token is rejected before a store session is opened.
Tokens are not revocable: the role inside a token is the role the user had
when it was issued, for the token's whole 24 hour lifetime.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional
import bcrypt
from jose import jwt, JWTError
from fastapi import HTTPException, Request, status
from hospital.config import get_settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_EXPIRE_SECONDS = 86400  # 24 hours

ROLES = ("admin", "doctor", "nurse", "patient")
REGISTRABLE_ROLES = ("doctor", "nurse", "patient")

# Roles allowed per resource section; sections missing here are open to any signed-in user
SECTION_ROLES = {
    "patients": ("admin", "doctor", "nurse"),
    "doctors": ("admin",),
    "billing": ("admin",),
    "departments": ("admin",),
    "inventory": ("admin",),
}


@dataclass
class UserPrincipal:
    """Resolved identity attached to each request."""
    user_id: str
    email: str
    role: str                     # "admin" | "doctor" | "nurse" | "patient"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; longer input is cut there
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_token(user_id: str, email: str, role: str) -> str:
    """Create a signed JWT carrying the user's id, email and role."""
    settings = get_settings()
    now = int(time.time())
    payload = {
        "sub": user_id,
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + TOKEN_EXPIRE_SECONDS,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[UserPrincipal]:
    """Decode and validate a JWT. Returns None if invalid/expired/malformed."""
    try:
        settings = get_settings()
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[ALGORITHM])
        return UserPrincipal(
            user_id=payload["sub"],
            email=payload["email"],
            role=payload["role"],
        )
    except (JWTError, KeyError):
        return None


async def get_current_user(request: Request) -> UserPrincipal:
    """
    FastAPI dependency. Extracts the JWT from the Authorization header.
    401 if the header is absent, 403 if the token does not verify.
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer ") or not auth_header[7:].strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required")
    principal = decode_token(auth_header[7:].strip())
    if principal is None:
        logger.warning(f"Rejected token on {request.method} {request.url.path}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
    request.state.user = principal
    return principal


def require_roles(*roles: str):
    """
    Build a dependency admitting only the given roles. With no roles, any
    authenticated user passes.
    """
    async def role_gate(request: Request) -> UserPrincipal:
        principal = await get_current_user(request)
        if roles and principal.role not in roles:
            logger.warning(f"Role '{principal.role}' denied on {request.method} {request.url.path}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied for role '{principal.role}'",
            )
        return principal

    return role_gate
