"""
Driver model for the fleet roster.
"""
from sqlalchemy import Column, String, Enum as SQLEnum
from drivepay.db.base import Base
import enum


class PaymentPreference(str, enum.Enum):
    """How a driver's per-trip earnings are split between the two pay cycles."""
    ALL_BATTA = "ALL_BATTA"    # everything paid weekly
    ALL_SALARY = "ALL_SALARY"  # everything paid monthly
    SPLIT = "SPLIT"            # batta weekly, salary monthly

    @property
    def label(self) -> str:
        return self.value.replace("_", " ", 1)


class DriverModel(Base):
    """Driver row. Deleting a driver leaves its trips and settlements in place."""
    __tablename__ = "drivers"
    
    id = Column(String(64), primary_key=True)
    name = Column(String(100), nullable=False)
    vehicle_id = Column(String(50), nullable=False)
    preference = Column(SQLEnum(PaymentPreference), default=PaymentPreference.SPLIT, nullable=False)
    avatar = Column(String(255), nullable=True)
