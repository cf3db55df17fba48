"""
Pydantic schemas for Settlement entity and pending amounts.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal
from drivepay.core.utils import UtcDatetime
from drivepay.models.settlement import SettlementType


class PendingAmounts(BaseModel):
    """Money owed to one driver and not yet covered by a settlement."""
    batta: Decimal = Decimal("0")   # weekly cycle
    salary: Decimal = Decimal("0")  # monthly cycle
    
    def for_type(self, settlement_type: SettlementType) -> Decimal:
        if settlement_type == SettlementType.WEEKLY:
            return self.batta
        return self.salary


class Settlement(BaseModel):
    """Immutable settlement record."""
    id: str
    driver_id: str
    type: SettlementType
    amount: Decimal = Field(max_digits=12, decimal_places=2)  # Numeric(12, 2) column
    timestamp: UtcDatetime
    trip_ids: List[str]
    
    class Config:
        from_attributes = True


class SettlementHistoryItem(Settlement):
    """Settlement as shown in the history view."""
    driver_name: Optional[str] = None  # None once the driver has been removed


class SettleResponse(BaseModel):
    """Schema for the settle action; ``data`` is None when nothing was pending."""
    message: str
    data: Optional[Settlement] = None


class DriverPendingResponse(BaseModel):
    """Schema for a driver's pending amounts and settle actions."""
    driver_id: str
    name: str
    preference: str
    pending_batta: Decimal
    pending_salary: Decimal
    can_settle_weekly: bool
    can_settle_monthly: bool
