"""
Route model with fixed per-trip rates.
"""
from sqlalchemy import Column, String, Numeric
from drivepay.db.base import Base


class RouteModel(Base):
    """Route between two places, paid at the same rates every time it is driven."""
    __tablename__ = "routes"
    
    id = Column(String(64), primary_key=True)
    origin = Column(String(200), nullable=False)
    destination = Column(String(200), nullable=False)
    batta_rate = Column(Numeric(12, 2), nullable=False, default=0)  # weekly component
    salary_rate = Column(Numeric(12, 2), nullable=False, default=0)  # monthly component
