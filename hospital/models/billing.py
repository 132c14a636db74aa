from sqlalchemy import Column, String, Text, Float, Date, DateTime
from hospital.database import Base, generate_id, utcnow


class Billing(Base):
    __tablename__ = "billing"

    id = Column(String(32), primary_key=True, default=generate_id)
    patient_id = Column(String(32), index=True, nullable=False)
    amount = Column(Float, nullable=False)
    description = Column(Text)
    status = Column(String(20), nullable=False, default="pending", index=True)
    due_date = Column(Date)
    payment_method = Column(String(50))
    invoice_number = Column(String(100))
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
