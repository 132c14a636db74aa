from sqlalchemy import Column, String, Date, Text, DateTime
from hospital.database import Base, generate_id, utcnow


class Patient(Base):
    __tablename__ = "patients"

    id = Column(String(32), primary_key=True, default=generate_id)
    patient_number = Column(String(50), index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    date_of_birth = Column(Date)
    gender = Column(String(20))
    phone = Column(String(30))
    email = Column(String(200))
    address = Column(Text)
    emergency_contact = Column(String(200))
    medical_history = Column(Text)
    blood_type = Column(String(5))
    allergies = Column(Text)
    avatar = Column(String(500))
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
