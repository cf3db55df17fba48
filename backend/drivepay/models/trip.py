"""
Trip model for logged driver operations.
"""
from sqlalchemy import Column, String, DateTime, Boolean
from drivepay.db.base import Base


class TripModel(Base):
    """A single logged trip. Only the two settlement flags ever change."""
    __tablename__ = "trips"
    
    id = Column(String(64), primary_key=True)
    # No foreign keys: drivers and routes may be deleted while trips remain
    driver_id = Column(String(64), nullable=False, index=True)
    route_id = Column(String(64), nullable=False, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    vehicle_id = Column(String(50), nullable=True)
    settled_weekly = Column(Boolean, default=False, nullable=False)
    settled_monthly = Column(Boolean, default=False, nullable=False)
