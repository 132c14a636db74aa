import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware
from sqlalchemy import select
from email_validator import validate_email
from hospital.config import get_settings
from hospital.database import engine, Base, async_session
from hospital.exceptions import register_exception_handlers
from hospital.middleware.request_logging import RequestLoggingMiddleware
from hospital.routers import auth as auth_router
from hospital.routers import dashboard, notifications, reports, uploads
from hospital.routers.resources import build_resource_router
from hospital.services.resources import RESOURCES

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


async def seed_admin_user():
    """Create the configured bootstrap admin if it doesn't exist. Idempotent."""
    from hospital.models.user import User
    from hospital.auth import hash_password

    if not (settings.bootstrap_admin_email and settings.bootstrap_admin_password):
        return

    # Same normalisation EmailStr applies on register and login
    email = validate_email(settings.bootstrap_admin_email, check_deliverability=False).normalized

    async with async_session() as session:
        existing = await session.scalar(select(User).where(User.email == email))
        if existing:
            return
        session.add(User(
            name=settings.bootstrap_admin_name,
            email=email,
            password_hash=hash_password(settings.bootstrap_admin_password),
            role="admin",
        ))
        await session.commit()
    logger.info(f"Created bootstrap admin {email}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables then seed the admin account
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await seed_admin_user()
    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title="Hospital Management API",
    description="Patients, doctors, appointments, medical records, billing, departments and inventory",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Middleware to add no-cache headers to API responses."""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"
            response.headers["Expires"] = "0"
            response.headers["Pragma"] = "no-cache"
        return response


app.add_middleware(NoCacheMiddleware)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(uploads.router, prefix="/api/upload", tags=["Uploads"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(reports.router, prefix="/api/reports", tags=["Reports"])
app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
for resource in RESOURCES:
    app.include_router(
        build_resource_router(resource),
        prefix=f"/api/{resource.name}",
        tags=[resource.label],
    )

os.makedirs(settings.upload_dir, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "hospital-management-api"}
