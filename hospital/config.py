from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./hospital.db",
        env="DATABASE_URL",
    )

    # Auth
    jwt_secret_key: str = Field(default="hospital-secret-key-change-in-production", env="JWT_SECRET_KEY")
    bcrypt_rounds: int = Field(default=12, env="BCRYPT_ROUNDS")

    # File uploads
    upload_dir: str = Field(default="./uploads", env="UPLOAD_DIR")

    # HTTP
    cors_origins: list[str] = Field(default=["*"], env="CORS_ORIGINS")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # First admin account, created at startup when both are set
    bootstrap_admin_email: Optional[str] = Field(default=None, env="BOOTSTRAP_ADMIN_EMAIL")
    bootstrap_admin_password: Optional[str] = Field(default=None, env="BOOTSTRAP_ADMIN_PASSWORD")
    bootstrap_admin_name: str = Field(default="Administrator", env="BOOTSTRAP_ADMIN_NAME")

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
