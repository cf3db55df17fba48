"""
Storage interface for the ledger and startup selection of the active backend.

Two backends exist. The remote backend writes every change to the SQL
database as it happens; the local backend writes the whole snapshot to a
blob store after every change. The ledger calls both hooks for every
command, so it never needs to know which one is active.
"""
from dataclasses import dataclass, field
from typing import List
import enum
import logging

from sqlalchemy.exc import SQLAlchemyError

from drivepay.core.config import Settings, settings as default_settings
from drivepay.schemas.driver import Driver
from drivepay.schemas.route import Route
from drivepay.schemas.trip import Trip
from drivepay.schemas.settlement import Settlement

logger = logging.getLogger(__name__)


class StorageMode(str, enum.Enum):
    REMOTE = "remote"
    LOCAL = "local"

    @property
    def label(self) -> str:
        if self == StorageMode.REMOTE:
            return "Cloud Synchronized"
        return "Local Storage Mode"


class StoreWriteError(RuntimeError):
    """A write to the active store failed; the mutation was not applied."""


@dataclass
class LedgerSnapshot:
    """All four collections. Trips and settlements are kept newest first."""
    drivers: List[Driver] = field(default_factory=list)
    routes: List[Route] = field(default_factory=list)
    trips: List[Trip] = field(default_factory=list)
    settlements: List[Settlement] = field(default_factory=list)


class LedgerBackend:
    """Base class for ledger storage.

    Mutation hooks are called before the in-memory snapshot changes and must
    raise StoreWriteError on failure. ``persist`` receives the snapshot the
    ledger is about to adopt.
    """
    mode: StorageMode

    def load(self) -> LedgerSnapshot:
        raise NotImplementedError

    def add_driver(self, driver: Driver) -> None:
        pass

    def remove_driver(self, driver_id: str) -> None:
        pass

    def add_route(self, route: Route) -> None:
        pass

    def remove_route(self, route_id: str) -> None:
        pass

    def add_trip(self, trip: Trip) -> None:
        pass

    def record_settlement(self, settlement: Settlement) -> None:
        """Store the settlement, then mark its trips settled for its type."""
        pass

    def persist(self, snapshot: LedgerSnapshot) -> None:
        pass


def select_backend(config: Settings = None) -> LedgerBackend:
    """
    Pick the storage backend once at startup.

    A configured and reachable DATABASE_URL gives the remote backend; anything
    else degrades to the local blob store.
    """
    from drivepay.db.local import LocalBlobStore, LocalLedgerBackend
    from drivepay.db.remote import SqlLedgerBackend
    from drivepay.db.session import build_engine, build_session_factory, init_db

    config = config or default_settings
    if config.DATABASE_URL:
        try:
            engine = build_engine(config.DATABASE_URL, echo=config.DB_ECHO)
            init_db(engine)
            logger.info("Using remote store")
            return SqlLedgerBackend(build_session_factory(engine))
        except SQLAlchemyError as e:
            logger.warning(f"Remote store unavailable ({e}). Falling back to local storage.")
    else:
        logger.warning("DATABASE_URL is not configured. Using local storage.")

    logger.info(f"Using local store at {config.LOCAL_STORE_PATH}")
    return LocalLedgerBackend(LocalBlobStore(config.LOCAL_STORE_PATH))
