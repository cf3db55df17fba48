"""
Remote tabular store backed by an SQL database.
"""
from typing import Callable, List, Sequence
import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from drivepay.db.backend import LedgerBackend, LedgerSnapshot, StorageMode, StoreWriteError
from drivepay.models import DriverModel, RouteModel, TripModel, SettlementModel, SettlementType
from drivepay.schemas.driver import Driver
from drivepay.schemas.route import Route
from drivepay.schemas.trip import Trip
from drivepay.schemas.settlement import Settlement

logger = logging.getLogger(__name__)


def insert_rows(db: Session, model, records: Sequence[BaseModel]) -> None:
    """Insert one or many records into the model's table."""
    db.add_all([model(**record.model_dump()) for record in records])


def delete_by_id(db: Session, model, record_id: str) -> int:
    return db.query(model).filter(model.id == record_id).delete(synchronize_session=False)


def mark_trips_settled(db: Session, trip_ids: List[str], settlement_type: SettlementType) -> int:
    """Bulk update of one settlement flag on the given trips."""
    if not trip_ids:
        return 0
    column = TripModel.settled_weekly if settlement_type == SettlementType.WEEKLY else TripModel.settled_monthly
    return db.query(TripModel).filter(TripModel.id.in_(trip_ids)).update(
        {column: True}, synchronize_session=False
    )


class SqlLedgerBackend(LedgerBackend):
    """Writes every mutation straight to the database."""
    mode = StorageMode.REMOTE

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def load(self) -> LedgerSnapshot:
        db = self.session_factory()
        try:
            return LedgerSnapshot(
                drivers=[Driver.model_validate(row) for row in db.query(DriverModel).all()],
                routes=[Route.model_validate(row) for row in db.query(RouteModel).all()],
                trips=[
                    Trip.model_validate(row)
                    for row in db.query(TripModel).order_by(TripModel.timestamp.desc()).all()
                ],
                settlements=[
                    Settlement.model_validate(row)
                    for row in db.query(SettlementModel).order_by(SettlementModel.timestamp.desc()).all()
                ],
            )
        finally:
            db.close()

    def _write(self, action: str, apply: Callable[[Session], None]) -> None:
        """Run ``apply`` in one transaction; roll back and raise on failure."""
        db = self.session_factory()
        try:
            apply(db)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Remote store error while trying to {action}: {e}", exc_info=True)
            raise StoreWriteError(f"Could not {action}") from e
        finally:
            db.close()

    def add_driver(self, driver: Driver) -> None:
        self._write("add driver", lambda db: insert_rows(db, DriverModel, [driver]))

    def remove_driver(self, driver_id: str) -> None:
        self._write("remove driver", lambda db: delete_by_id(db, DriverModel, driver_id))

    def add_route(self, route: Route) -> None:
        self._write("add route", lambda db: insert_rows(db, RouteModel, [route]))

    def remove_route(self, route_id: str) -> None:
        self._write("remove route", lambda db: delete_by_id(db, RouteModel, route_id))

    def add_trip(self, trip: Trip) -> None:
        self._write("log trip", lambda db: insert_rows(db, TripModel, [trip]))

    def record_settlement(self, settlement: Settlement) -> None:
        def apply(db: Session) -> None:
            insert_rows(db, SettlementModel, [settlement])
            # Settlement row goes in first; flags follow in the same transaction
            db.flush()
            mark_trips_settled(db, settlement.trip_ids, settlement.type)

        self._write("record settlement", apply)
