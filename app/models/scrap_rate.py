from sqlalchemy import Column, String, DateTime, DECIMAL
from app.database import Base
from app.models.constant import IST
from datetime import datetime

class ScrapRate(Base):
    __tablename__ = "scrap_rates"

    category = Column(String(20), primary_key=True)  # paper, plastic, metal, ewaste
    price_per_kg = Column(DECIMAL(8, 2), nullable=False)  # INR
    updated_at = Column(DateTime, default=lambda: datetime.now(IST), onupdate=lambda: datetime.now(IST))
