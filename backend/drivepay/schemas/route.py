"""
Pydantic schemas for Route entity.
"""
from pydantic import BaseModel, Field
from decimal import Decimal


class RouteBase(BaseModel):
    """Base route schema."""
    origin: str = Field(max_length=200)
    destination: str = Field(max_length=200)
    # Same precision as the Numeric(12, 2) columns
    batta_rate: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)  # paid weekly
    salary_rate: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)  # paid monthly


class RouteCreate(RouteBase):
    """Schema for route creation."""
    pass


class Route(RouteBase):
    """Stored route record."""
    id: str
    
    class Config:
        from_attributes = True
    
    @property
    def total_rate(self) -> Decimal:
        return self.batta_rate + self.salary_rate
