"""
Shared fixtures: ledgers over both storage backends and an API client.
"""
import pytest
from fastapi.testclient import TestClient

from drivepay.api.dependencies import get_ledger
from drivepay.db.local import LocalBlobStore, LocalLedgerBackend
from drivepay.db.remote import SqlLedgerBackend
from drivepay.db.session import build_engine, build_session_factory, init_db
from drivepay.main import app
from drivepay.services.ledger_service import Ledger


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_backend(engine):
    return SqlLedgerBackend(build_session_factory(engine))


@pytest.fixture
def blob_store(tmp_path):
    return LocalBlobStore(str(tmp_path / "drivepay.json"))


@pytest.fixture
def local_backend(blob_store):
    return LocalLedgerBackend(blob_store)


@pytest.fixture(params=["remote", "local"])
def ledger(request):
    """A ledger over each storage backend in turn."""
    backend = request.getfixturevalue("sql_backend" if request.param == "remote" else "local_backend")
    return Ledger(backend)


@pytest.fixture
def client(local_backend):
    ledger = Ledger(local_backend)
    app.dependency_overrides[get_ledger] = lambda: ledger
    yield TestClient(app)
    app.dependency_overrides.clear()
