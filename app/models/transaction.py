# models/transaction.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, Date, JSON, DECIMAL
from sqlalchemy.orm import relationship
from app.models.constant import IST
from app.database import Base
from datetime import datetime

class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    transaction_id = Column(String(35), unique=True, index=True, nullable=False)

    # Order fields
    categories = Column(JSON, nullable=False)  # list of scrap categories
    weight_kg = Column(Float, nullable=False)
    location = Column(String(200), nullable=False)

    # Server-side price quote
    estimated_price = Column(DECIMAL(10, 2), nullable=False)
    confidence_score = Column(Integer, nullable=False)

    # Scheduling
    pickup_date = Column(Date, nullable=False)
    pickup_time = Column(String(50), nullable=False)
    pickup_type = Column(String(10), nullable=False, default="pickup")  # pickup, dropoff

    payment_method = Column(String(10), nullable=False)  # upi, cash
    status = Column(String(20), nullable=False, default="pending")  # pending, confirmed, completed, cancelled

    created_at = Column(DateTime, default=lambda: datetime.now(IST))
    updated_at = Column(DateTime, default=lambda: datetime.now(IST), onupdate=lambda: datetime.now(IST))

    user = relationship("User", back_populates="transactions")

    def __repr__(self):
        return f"<Transaction(transaction_id='{self.transaction_id}', status='{self.status}')>"
