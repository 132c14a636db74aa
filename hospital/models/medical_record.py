from sqlalchemy import Column, String, Text, Date, DateTime, JSON
from hospital.database import Base, generate_id, utcnow


class MedicalRecord(Base):
    __tablename__ = "medical_records"

    id = Column(String(32), primary_key=True, default=generate_id)
    patient_id = Column(String(32), index=True, nullable=False)
    doctor_id = Column(String(32), index=True, nullable=False)
    diagnosis = Column(Text, nullable=False)
    prescription = Column(Text)
    treatment = Column(Text)
    notes = Column(Text)
    follow_up_date = Column(Date)
    attachments = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
