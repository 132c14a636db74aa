from sqlalchemy import Column, Integer, String, Text, DateTime
from hospital.database import Base, generate_id, utcnow


class Department(Base):
    __tablename__ = "departments"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    head_doctor = Column(String(200))
    staff_count = Column(Integer)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
