"""
Settlement model: append-only log of payouts.
"""
from sqlalchemy import Column, String, Numeric, DateTime, JSON, Enum as SQLEnum
from drivepay.db.base import Base
import enum


class SettlementType(str, enum.Enum):
    """Pay cycle a settlement belongs to."""
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


class SettlementModel(Base):
    """Settlement row storing the amount paid and the trips it covers."""
    __tablename__ = "settlements"
    
    id = Column(String(64), primary_key=True)
    driver_id = Column(String(64), nullable=False, index=True)
    type = Column(SQLEnum(SettlementType), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    trip_ids = Column(JSON, nullable=False)  # list of covered trip ids
