from sqlalchemy import Column, String, Text, DateTime
from hospital.database import Base, generate_id, utcnow


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(32), primary_key=True, default=generate_id)
    # Plain ids, not foreign keys: dangling references are stored as given
    patient_id = Column(String(32), index=True, nullable=False)
    doctor_id = Column(String(32), index=True, nullable=False)
    appointment_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    reason = Column(Text)
    notes = Column(Text)
    priority = Column(String(10), nullable=False, default="medium")
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
