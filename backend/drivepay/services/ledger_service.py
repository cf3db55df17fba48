"""
Ledger service: owns the in-memory snapshot and exposes the operator commands.

Every command builds the next snapshot, hands the change to the storage
backend and only then adopts the new snapshot. A StoreWriteError from the
backend propagates to the caller and leaves the ledger as it was.
"""
from dataclasses import replace
from decimal import Decimal
from typing import Callable, List, Optional
import logging

from drivepay.core.utils import format_money, new_id, utcnow
from drivepay.db.backend import LedgerBackend, LedgerSnapshot, StorageMode, select_backend
from drivepay.models.settlement import SettlementType
from drivepay.schemas.driver import Driver, DriverCreate
from drivepay.schemas.route import Route, RouteCreate
from drivepay.schemas.trip import Trip, TripCreate
from drivepay.schemas.settlement import (
    DriverPendingResponse, PendingAmounts, Settlement, SettlementHistoryItem
)
from drivepay.schemas.dashboard import FleetOverview
from drivepay.services.payment_service import compute_pending
from drivepay.services.settlement_service import apply_settlement, prepare_settlement

logger = logging.getLogger(__name__)


class Ledger:
    """Single owner of the fleet's drivers, routes, trips and settlements."""

    def __init__(self, backend: LedgerBackend):
        self.backend = backend
        self._state: LedgerSnapshot = backend.load()
        logger.info(
            f"Ledger loaded ({backend.mode.label}): {len(self._state.drivers)} drivers, "
            f"{len(self._state.routes)} routes, {len(self._state.trips)} trips, "
            f"{len(self._state.settlements)} settlements"
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def mode(self) -> StorageMode:
        return self.backend.mode

    @property
    def drivers(self) -> List[Driver]:
        return list(self._state.drivers)

    @property
    def routes(self) -> List[Route]:
        return list(self._state.routes)

    @property
    def trips(self) -> List[Trip]:
        return list(self._state.trips)

    @property
    def settlements(self) -> List[Settlement]:
        return list(self._state.settlements)

    def get_driver(self, driver_id: str) -> Optional[Driver]:
        return next((d for d in self._state.drivers if d.id == driver_id), None)

    def get_route(self, route_id: str) -> Optional[Route]:
        return next((r for r in self._state.routes if r.id == route_id), None)

    def pending_for(self, driver_id: str) -> Optional[PendingAmounts]:
        driver = self.get_driver(driver_id)
        if driver is None:
            return None
        return compute_pending(driver, self._state.trips, self._state.routes)

    def driver_pending(self, driver: Driver) -> DriverPendingResponse:
        pending = compute_pending(driver, self._state.trips, self._state.routes)
        return DriverPendingResponse(
            driver_id=driver.id,
            name=driver.name,
            preference=driver.preference.label,
            pending_batta=pending.batta,
            pending_salary=pending.salary,
            can_settle_weekly=pending.batta > 0,
            can_settle_monthly=pending.salary > 0
        )

    def overview(self) -> FleetOverview:
        """Totals for the dashboard plus one row per driver with money pending."""
        rows = [self.driver_pending(d) for d in self._state.drivers]
        return FleetOverview(
            total_disbursed=sum((s.amount for s in self._state.settlements), Decimal("0")),
            pending_batta=sum((r.pending_batta for r in rows), Decimal("0")),
            pending_salary=sum((r.pending_salary for r in rows), Decimal("0")),
            storage_mode=self.mode.value,
            storage_label=self.mode.label,
            payroll=[r for r in rows if r.pending_batta or r.pending_salary]
        )

    def settlement_history(self) -> List[SettlementHistoryItem]:
        names = {d.id: d.name for d in self._state.drivers}
        return [
            SettlementHistoryItem(**s.model_dump(), driver_name=names.get(s.driver_id))
            for s in self._state.settlements
        ]

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _commit(self, state: LedgerSnapshot, write: Callable[[], None]) -> None:
        write()
        self.backend.persist(state)
        self._state = state

    def add_driver(self, driver_data: DriverCreate) -> Optional[Driver]:
        """Register a driver. Returns None when name or vehicle is blank."""
        name = driver_data.name.strip()
        vehicle_id = driver_data.vehicle_id.strip()
        if not name or not vehicle_id:
            logger.warning("Driver registration blocked: name and vehicle are required")
            return None

        driver = Driver(
            id=new_id(),
            name=name,
            vehicle_id=vehicle_id,
            preference=driver_data.preference,
            avatar=driver_data.avatar
        )
        state = replace(self._state, drivers=[*self._state.drivers, driver])
        self._commit(state, lambda: self.backend.add_driver(driver))
        logger.info(f"Registered driver {driver.id} ({driver.name}, {driver.preference.value})")
        return driver

    def remove_driver(self, driver_id: str) -> bool:
        """Delete a driver. Its trips and settlements stay and count as zero."""
        if self.get_driver(driver_id) is None:
            return False
        state = replace(self._state, drivers=[d for d in self._state.drivers if d.id != driver_id])
        self._commit(state, lambda: self.backend.remove_driver(driver_id))
        logger.info(f"Removed driver {driver_id}")
        return True

    def add_route(self, route_data: RouteCreate) -> Optional[Route]:
        """Define a route. Returns None when either endpoint is blank."""
        origin = route_data.origin.strip()
        destination = route_data.destination.strip()
        if not origin or not destination:
            logger.warning("Route creation blocked: origin and destination are required")
            return None

        route = Route(
            id=new_id(),
            origin=origin,
            destination=destination,
            batta_rate=route_data.batta_rate,
            salary_rate=route_data.salary_rate
        )
        state = replace(self._state, routes=[*self._state.routes, route])
        self._commit(state, lambda: self.backend.add_route(route))
        logger.info(f"Added route {route.id} ({route.origin} -> {route.destination})")
        return route

    def remove_route(self, route_id: str) -> bool:
        if self.get_route(route_id) is None:
            return False
        state = replace(self._state, routes=[r for r in self._state.routes if r.id != route_id])
        self._commit(state, lambda: self.backend.remove_route(route_id))
        logger.info(f"Removed route {route_id}")
        return True

    def log_trip(self, trip_data: TripCreate) -> Optional[Trip]:
        """Log a trip for a known driver on a known route."""
        driver = self.get_driver(trip_data.driver_id)
        if driver is None or self.get_route(trip_data.route_id) is None:
            logger.warning(
                f"Trip not logged: unknown driver {trip_data.driver_id!r} or route {trip_data.route_id!r}"
            )
            return None

        trip = Trip(
            id=new_id(),
            driver_id=driver.id,
            route_id=trip_data.route_id,
            timestamp=utcnow(),
            vehicle_id=driver.vehicle_id,
            settled_weekly=False,
            settled_monthly=False
        )
        state = replace(self._state, trips=[trip, *self._state.trips])
        self._commit(state, lambda: self.backend.add_trip(trip))
        logger.info(f"Logged trip {trip.id} for driver {driver.id} on route {trip.route_id}")
        return trip

    def settle(self, driver_id: str, settlement_type: SettlementType) -> Optional[Settlement]:
        """
        Pay out everything pending for one driver in one cycle.

        Returns the new settlement, or None when the driver is unknown or
        nothing is pending (no record is created and no trip changes).
        """
        driver = self.get_driver(driver_id)
        if driver is None:
            return None

        settlement = prepare_settlement(
            driver, self._state.trips, self._state.routes, settlement_type
        )
        if settlement is None:
            logger.info(f"Nothing pending for driver {driver_id} ({settlement_type.value})")
            return None

        state = replace(
            self._state,
            trips=apply_settlement(self._state.trips, settlement),
            settlements=[settlement, *self._state.settlements]
        )
        self._commit(state, lambda: self.backend.record_settlement(settlement))
        logger.info(
            f"Settled {format_money(settlement.amount)} {settlement_type.value.lower()} for driver "
            f"{driver_id} covering {len(settlement.trip_ids)} trips"
        )
        return settlement


def open_ledger() -> Ledger:
    """Select the storage backend and load the ledger from it."""
    return Ledger(select_backend())
