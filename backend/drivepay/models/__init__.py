"""Models package - Import all models for SQLAlchemy registration."""
from drivepay.models.driver import DriverModel, PaymentPreference
from drivepay.models.route import RouteModel
from drivepay.models.trip import TripModel
from drivepay.models.settlement import SettlementModel, SettlementType

__all__ = [
    "DriverModel",
    "PaymentPreference",
    "RouteModel",
    "TripModel",
    "SettlementModel",
    "SettlementType",
]
