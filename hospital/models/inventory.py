from sqlalchemy import Column, Integer, String, Float, Date, DateTime
from hospital.database import Base, generate_id, utcnow


class InventoryItem(Base):
    __tablename__ = "inventory"

    id = Column(String(32), primary_key=True, default=generate_id)
    item_name = Column(String(200), nullable=False)
    category = Column(String(100))
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float)
    supplier = Column(String(200))
    expiry_date = Column(Date)
    # Set by staff; never derived from quantity
    status = Column(String(20), nullable=False, default="available", index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
