"""
Payment engine: pending batta/salary for a driver.
"""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from drivepay.models.driver import PaymentPreference
from drivepay.models.settlement import SettlementType
from drivepay.schemas.driver import Driver
from drivepay.schemas.route import Route
from drivepay.schemas.trip import Trip
from drivepay.schemas.settlement import PendingAmounts

ZERO = Decimal("0")


def trip_contribution(driver: Driver, route: Optional[Route], settlement_type: SettlementType) -> Decimal:
    """
    Amount one trip on ``route`` adds to the given pay cycle, ignoring flags.

    ALL_BATTA puts the whole route value in the weekly cycle, ALL_SALARY puts
    it in the monthly cycle and SPLIT pays each rate in its own cycle. A
    deleted route contributes nothing.
    """
    if route is None:
        return ZERO
    preference = driver.preference
    if settlement_type == SettlementType.WEEKLY:
        if preference == PaymentPreference.ALL_BATTA:
            return route.total_rate
        if preference == PaymentPreference.SPLIT:
            return route.batta_rate
        return ZERO
    if preference == PaymentPreference.ALL_SALARY:
        return route.total_rate
    if preference == PaymentPreference.SPLIT:
        return route.salary_rate
    return ZERO


def driver_trips(driver_id: str, trips: Iterable[Trip]) -> List[Trip]:
    return [t for t in trips if t.driver_id == driver_id]


def compute_pending(driver: Driver, trips: Iterable[Trip], routes: Iterable[Route]) -> PendingAmounts:
    """Compute what is still owed to ``driver`` in each pay cycle."""
    route_map: Dict[str, Route] = {r.id: r for r in routes}
    batta = ZERO
    salary = ZERO

    for trip in driver_trips(driver.id, trips):
        route = route_map.get(trip.route_id)
        if route is None:
            continue
        if not trip.settled_weekly:
            batta += trip_contribution(driver, route, SettlementType.WEEKLY)
        if not trip.settled_monthly:
            salary += trip_contribution(driver, route, SettlementType.MONTHLY)

    return PendingAmounts(batta=batta, salary=salary)


def accrued_total(driver: Driver, trips: Iterable[Trip], routes: Iterable[Route]) -> Decimal:
    """Total value of all the driver's trips in both cycles, settled or not."""
    route_map: Dict[str, Route] = {r.id: r for r in routes}
    total = ZERO
    for trip in driver_trips(driver.id, trips):
        route = route_map.get(trip.route_id)
        total += trip_contribution(driver, route, SettlementType.WEEKLY)
        total += trip_contribution(driver, route, SettlementType.MONTHLY)
    return total
