"""
Local fallback store: a JSON file holding one serialized collection per key.
"""
from pathlib import Path
from typing import Dict, List, Optional, Type, TypeVar
import json
import logging
import os

from pydantic import BaseModel

from drivepay.db.backend import LedgerBackend, LedgerSnapshot, StorageMode, StoreWriteError
from drivepay.schemas.driver import Driver
from drivepay.schemas.route import Route
from drivepay.schemas.trip import Trip
from drivepay.schemas.settlement import Settlement

logger = logging.getLogger(__name__)

DRIVERS_KEY = "drive_pay_drivers"
ROUTES_KEY = "drive_pay_routes"
TRIPS_KEY = "drive_pay_trips"
SETTLEMENTS_KEY = "drive_pay_settlements"

T = TypeVar("T", bound=BaseModel)


class LocalBlobStore:
    """String-keyed blob store persisted to a single JSON file."""

    def __init__(self, path: str):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return {}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, values: Dict[str, str]) -> None:
        """Write several keys with a single file replace."""
        data = self._read()
        data.update(values)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)


def dump_collection(records: List[BaseModel]) -> str:
    return json.dumps([record.model_dump(mode="json") for record in records], ensure_ascii=False)


def load_collection(raw: Optional[str], model: Type[T]) -> List[T]:
    if not raw:
        return []
    return [model.model_validate(item) for item in json.loads(raw)]


class LocalLedgerBackend(LedgerBackend):
    """Persists all four collections after every state change."""
    mode = StorageMode.LOCAL

    def __init__(self, store: LocalBlobStore):
        self.store = store

    def load(self) -> LedgerSnapshot:
        settlements = load_collection(self.store.get(SETTLEMENTS_KEY), Settlement)
        settlements.sort(key=lambda s: s.timestamp, reverse=True)
        return LedgerSnapshot(
            drivers=load_collection(self.store.get(DRIVERS_KEY), Driver),
            routes=load_collection(self.store.get(ROUTES_KEY), Route),
            trips=load_collection(self.store.get(TRIPS_KEY), Trip),
            settlements=settlements,
        )

    def persist(self, snapshot: LedgerSnapshot) -> None:
        try:
            self.store.set_many({
                DRIVERS_KEY: dump_collection(snapshot.drivers),
                ROUTES_KEY: dump_collection(snapshot.routes),
                TRIPS_KEY: dump_collection(snapshot.trips),
                SETTLEMENTS_KEY: dump_collection(snapshot.settlements),
            })
        except OSError as e:
            logger.error(f"Could not write local store {self.store.path}: {e}", exc_info=True)
            raise StoreWriteError("Could not save to local storage") from e
