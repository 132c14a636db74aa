from sqlalchemy import Column, Integer, String, DateTime
from hospital.database import Base, generate_id, utcnow


class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(String(32), primary_key=True, default=generate_id)
    doctor_number = Column(String(50), index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    specialization = Column(String(200), nullable=False)
    phone = Column(String(30))
    email = Column(String(200))
    license_number = Column(String(100))
    department = Column(String(200))
    experience = Column(Integer)
    avatar = Column(String(500))
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
