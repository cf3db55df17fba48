"""
Pydantic schemas for Driver entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from drivepay.models.driver import PaymentPreference


class DriverBase(BaseModel):
    """Base driver schema."""
    name: str = Field(max_length=100)
    vehicle_id: str = Field(max_length=50)
    preference: PaymentPreference = PaymentPreference.SPLIT
    avatar: Optional[str] = Field(default=None, max_length=255)


class DriverCreate(DriverBase):
    """Schema for driver registration."""
    pass


class Driver(DriverBase):
    """Stored driver record."""
    id: str
    
    class Config:
        from_attributes = True
