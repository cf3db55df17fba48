"""
Tests for the pending amount computation.
"""
from datetime import datetime, timezone
from decimal import Decimal

from drivepay.models.driver import PaymentPreference
from drivepay.models.settlement import SettlementType
from drivepay.schemas.driver import Driver
from drivepay.schemas.route import Route
from drivepay.schemas.trip import Trip
from drivepay.services.payment_service import accrued_total, compute_pending, trip_contribution

NOW = datetime(2026, 10, 1, tzinfo=timezone.utc)


def make_driver(preference, driver_id="d1"):
    return Driver(id=driver_id, name="Ravi", vehicle_id="V1", preference=preference)


def make_route(route_id, batta, salary):
    return Route(id=route_id, origin="A", destination="B",
                 batta_rate=Decimal(batta), salary_rate=Decimal(salary))


def make_trip(trip_id, route_id, driver_id="d1", weekly=False, monthly=False):
    return Trip(id=trip_id, driver_id=driver_id, route_id=route_id, timestamp=NOW,
                settled_weekly=weekly, settled_monthly=monthly)


def test_split_pays_each_rate_in_its_own_cycle():
    """Split preference: batta weekly, salary monthly."""
    driver = make_driver(PaymentPreference.SPLIT)
    routes = [make_route("r1", 100, 300)]
    pending = compute_pending(driver, [make_trip("t1", "r1")], routes)
    assert pending.batta == Decimal("100")
    assert pending.salary == Decimal("300")


def test_split_sums_over_unsettled_trips_per_cycle():
    driver = make_driver(PaymentPreference.SPLIT)
    routes = [make_route("r1", 100, 300), make_route("r2", 40, 60)]
    trips = [
        make_trip("t1", "r1", weekly=True),
        make_trip("t2", "r2", monthly=True),
        make_trip("t3", "r2"),
    ]
    pending = compute_pending(driver, trips, routes)
    assert pending.batta == Decimal("80")     # t2 + t3
    assert pending.salary == Decimal("360")   # t1 + t3


def test_all_batta_two_trips():
    """All-batta: the whole route value goes to the weekly cycle."""
    driver = make_driver(PaymentPreference.ALL_BATTA)
    routes = [make_route("r1", 50, 150)]
    trips = [make_trip("t1", "r1"), make_trip("t2", "r1")]
    pending = compute_pending(driver, trips, routes)
    assert pending.batta == Decimal("400")
    assert pending.salary == Decimal("0")


def test_all_batta_ignores_monthly_flag():
    driver = make_driver(PaymentPreference.ALL_BATTA)
    routes = [make_route("r1", 50, 150)]
    pending = compute_pending(driver, [make_trip("t1", "r1", monthly=True)], routes)
    assert pending.batta == Decimal("200")
    assert pending.salary == Decimal("0")


def test_all_salary_never_has_batta():
    driver = make_driver(PaymentPreference.ALL_SALARY)
    routes = [make_route("r1", 50, 150)]
    trips = [make_trip("t1", "r1"), make_trip("t2", "r1", weekly=True)]
    pending = compute_pending(driver, trips, routes)
    assert pending.batta == Decimal("0")
    assert pending.salary == Decimal("400")


def test_other_drivers_trips_are_ignored():
    driver = make_driver(PaymentPreference.SPLIT)
    routes = [make_route("r1", 100, 300)]
    trips = [make_trip("t1", "r1", driver_id="someone-else")]
    pending = compute_pending(driver, trips, routes)
    assert pending.batta == 0 and pending.salary == 0


def test_missing_route_contributes_zero():
    """A trip on a deleted route neither crashes nor counts."""
    driver = make_driver(PaymentPreference.SPLIT)
    routes = [make_route("r1", 100, 300)]
    trips = [make_trip("t1", "r1"), make_trip("t2", "deleted-route")]
    pending = compute_pending(driver, trips, routes)
    assert pending.batta == Decimal("100")
    assert pending.salary == Decimal("300")


def test_trip_contribution_per_preference():
    route = make_route("r1", 10, 30)
    weekly, monthly = SettlementType.WEEKLY, SettlementType.MONTHLY
    assert trip_contribution(make_driver(PaymentPreference.ALL_BATTA), route, weekly) == 40
    assert trip_contribution(make_driver(PaymentPreference.ALL_BATTA), route, monthly) == 0
    assert trip_contribution(make_driver(PaymentPreference.ALL_SALARY), route, weekly) == 0
    assert trip_contribution(make_driver(PaymentPreference.ALL_SALARY), route, monthly) == 40
    assert trip_contribution(make_driver(PaymentPreference.SPLIT), route, weekly) == 10
    assert trip_contribution(make_driver(PaymentPreference.SPLIT), route, monthly) == 30
    assert trip_contribution(make_driver(PaymentPreference.SPLIT), None, weekly) == 0


def test_accrued_total_counts_settled_trips_too():
    driver = make_driver(PaymentPreference.SPLIT)
    routes = [make_route("r1", 100, 300)]
    trips = [make_trip("t1", "r1", weekly=True, monthly=True), make_trip("t2", "r1")]
    assert accrued_total(driver, trips, routes) == Decimal("800")
