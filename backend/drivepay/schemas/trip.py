"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel
from typing import Optional
from drivepay.core.utils import UtcDatetime
from drivepay.models.settlement import SettlementType


class TripCreate(BaseModel):
    """Schema for logging a trip."""
    driver_id: str
    route_id: str


class Trip(BaseModel):
    """Stored trip record."""
    id: str
    driver_id: str
    route_id: str
    timestamp: UtcDatetime
    vehicle_id: Optional[str] = None
    settled_weekly: bool = False
    settled_monthly: bool = False
    
    class Config:
        from_attributes = True
    
    def is_settled(self, settlement_type: SettlementType) -> bool:
        """Whether this trip is already covered for the given pay cycle."""
        if settlement_type == SettlementType.WEEKLY:
            return self.settled_weekly
        return self.settled_monthly
