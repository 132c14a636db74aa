from sqlalchemy import Column, String, DateTime
from hospital.database import Base, generate_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)
    email = Column(String(200), unique=True, nullable=False, index=True)
    password_hash = Column(String(200), nullable=False)
    role = Column(String(20), nullable=False, default="patient")  # "admin" | "doctor" | "nurse" | "patient"
    phone = Column(String(30))
    avatar = Column(String(500))
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
