"""
Pydantic schemas for the fleet overview.
"""
from pydantic import BaseModel
from typing import List
from decimal import Decimal
from drivepay.schemas.settlement import DriverPendingResponse


class FleetOverview(BaseModel):
    """Schema for the dashboard overview."""
    total_disbursed: Decimal  # all settlements ever recorded
    pending_batta: Decimal
    pending_salary: Decimal
    storage_mode: str
    storage_label: str
    payroll: List[DriverPendingResponse]  # drivers with something pending
