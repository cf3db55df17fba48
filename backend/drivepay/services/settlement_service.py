"""
Settlement service: turning pending amounts into settlement records.
"""
from datetime import datetime
from typing import Iterable, List, Optional
import uuid
from drivepay.core.utils import utcnow
from drivepay.models.settlement import SettlementType
from drivepay.schemas.driver import Driver
from drivepay.schemas.route import Route
from drivepay.schemas.trip import Trip
from drivepay.schemas.settlement import Settlement
from drivepay.services.payment_service import compute_pending, driver_trips


def new_settlement_id(settlement_type: SettlementType) -> str:
    """Settlement ids look like ``S-W-3f9c0a1b2d4e`` (W for weekly, M for monthly)."""
    return f"S-{settlement_type.value[0]}-{uuid.uuid4().hex[:12]}"


def prepare_settlement(
    driver: Driver,
    trips: List[Trip],
    routes: List[Route],
    settlement_type: SettlementType,
    now: Optional[datetime] = None
) -> Optional[Settlement]:
    """
    Build the settlement that would clear the driver's pending amount for one cycle.
    Returns None when nothing is pending.

    The covered trips are exactly those whose flag for this cycle is still
    unset, which is the set that produced the pending amount.
    """
    amount = compute_pending(driver, trips, routes).for_type(settlement_type)
    if amount == 0:
        return None

    covered = [
        t.id for t in driver_trips(driver.id, trips)
        if not t.is_settled(settlement_type)
    ]
    return Settlement(
        id=new_settlement_id(settlement_type),
        driver_id=driver.id,
        type=settlement_type,
        amount=amount,
        timestamp=now or utcnow(),
        trip_ids=covered
    )


def apply_settlement(trips: Iterable[Trip], settlement: Settlement) -> List[Trip]:
    """Return the trip list with the settlement's trips flagged for its cycle."""
    covered = set(settlement.trip_ids)
    flag = "settled_weekly" if settlement.type == SettlementType.WEEKLY else "settled_monthly"
    return [
        t.model_copy(update={flag: True}) if t.id in covered else t
        for t in trips
    ]
