"""
Tests for the HTTP endpoints.
"""
from decimal import Decimal

from drivepay.api.dependencies import get_ledger
from drivepay.db.backend import StoreWriteError
from drivepay.main import app


def create_driver(client, preference="SPLIT"):
    response = client.post(
        "/api/drivers",
        json={"name": "Ravi Kumar", "vehicle_id": "MH 12 AB 1234", "preference": preference}
    )
    assert response.status_code == 201
    return response.json()


def create_route(client, batta=100, salary=300):
    response = client.post(
        "/api/routes",
        json={"origin": "Pune", "destination": "Mumbai", "batta_rate": batta, "salary_rate": salary}
    )
    assert response.status_code == 201
    return response.json()


def test_health(client):
    """Test health check reports the storage mode."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["storage"] == "local"
    assert response.json()["label"] == "Local Storage Mode"


def test_register_and_list_drivers(client):
    driver = create_driver(client)
    assert driver["preference"] == "SPLIT"
    response = client.get("/api/drivers")
    assert [d["id"] for d in response.json()] == [driver["id"]]


def test_register_driver_requires_name(client):
    response = client.post("/api/drivers", json={"name": " ", "vehicle_id": "V1"})
    assert response.status_code == 400


def test_register_driver_rejects_unknown_preference(client):
    response = client.post(
        "/api/drivers", json={"name": "Ravi", "vehicle_id": "V1", "preference": "HOURLY"}
    )
    assert response.status_code == 422


def test_route_rates_must_be_non_negative(client):
    response = client.post(
        "/api/routes", json={"origin": "A", "destination": "B", "batta_rate": -5}
    )
    assert response.status_code == 422


def test_full_settlement_flow(client):
    """Log a trip, settle weekly, then check pending and history."""
    driver = create_driver(client)
    route = create_route(client)

    response = client.post("/api/trips", json={"driver_id": driver["id"], "route_id": route["id"]})
    assert response.status_code == 201
    trip = response.json()

    pending = client.get(f"/api/drivers/{driver['id']}/pending").json()
    assert Decimal(str(pending["pending_batta"])) == 100
    assert Decimal(str(pending["pending_salary"])) == 300
    assert pending["can_settle_weekly"] and pending["can_settle_monthly"]

    response = client.post(f"/api/settlements/{driver['id']}/WEEKLY")
    assert response.status_code == 200
    settlement = response.json()["data"]
    assert Decimal(str(settlement["amount"])) == 100
    assert settlement["trip_ids"] == [trip["id"]]

    pending = client.get(f"/api/drivers/{driver['id']}/pending").json()
    assert Decimal(str(pending["pending_batta"])) == 0
    assert not pending["can_settle_weekly"]

    history = client.get("/api/settlements").json()
    assert history[0]["driver_name"] == "Ravi Kumar"
    assert history[0]["type"] == "WEEKLY"

    trips = client.get("/api/trips", params={"driver_id": driver["id"]}).json()
    assert trips[0]["settled_weekly"] is True
    assert trips[0]["settled_monthly"] is False


def test_settle_with_nothing_pending(client):
    driver = create_driver(client, preference="ALL_BATTA")
    response = client.post(f"/api/settlements/{driver['id']}/MONTHLY")
    assert response.status_code == 200
    assert response.json()["data"] is None
    assert client.get("/api/settlements").json() == []


def test_settle_unknown_driver(client):
    response = client.post("/api/settlements/nobody/WEEKLY")
    assert response.status_code == 404


def test_settle_rejects_unknown_cycle(client):
    driver = create_driver(client)
    response = client.post(f"/api/settlements/{driver['id']}/DAILY")
    assert response.status_code == 422


def test_log_trip_unknown_route(client):
    driver = create_driver(client)
    response = client.post("/api/trips", json={"driver_id": driver["id"], "route_id": "nope"})
    assert response.status_code == 404


def test_remove_driver_needs_confirmation(client):
    driver = create_driver(client)
    response = client.delete(f"/api/drivers/{driver['id']}")
    assert response.status_code == 409
    assert len(client.get("/api/drivers").json()) == 1

    response = client.delete(f"/api/drivers/{driver['id']}", params={"confirm": "true"})
    assert response.status_code == 200
    assert client.get("/api/drivers").json() == []


def test_remove_route_keeps_trips(client):
    driver = create_driver(client)
    route = create_route(client)
    client.post("/api/trips", json={"driver_id": driver["id"], "route_id": route["id"]})

    assert client.delete(f"/api/routes/{route['id']}").status_code == 200
    assert client.delete(f"/api/routes/{route['id']}").status_code == 404
    assert len(client.get("/api/trips").json()) == 1
    pending = client.get(f"/api/drivers/{driver['id']}/pending").json()
    assert Decimal(str(pending["pending_batta"])) == 0


def test_dashboard(client):
    driver = create_driver(client, preference="ALL_SALARY")
    route = create_route(client, batta=50, salary=150)
    client.post("/api/trips", json={"driver_id": driver["id"], "route_id": route["id"]})

    overview = client.get("/api/dashboard").json()
    assert Decimal(str(overview["pending_salary"])) == 200
    assert Decimal(str(overview["pending_batta"])) == 0
    assert overview["storage_label"] == "Local Storage Mode"
    assert overview["payroll"][0]["driver_id"] == driver["id"]
    assert overview["payroll"][0]["can_settle_weekly"] is False


def test_store_failure_is_reported(client):
    """A failed write surfaces as 503 instead of being swallowed."""
    ledger = app.dependency_overrides[get_ledger]()

    def fail(snapshot):
        raise StoreWriteError("Could not save to local storage")

    ledger.backend.persist = fail
    response = client.post("/api/drivers", json={"name": "Ravi", "vehicle_id": "V1"})
    assert response.status_code == 503
    assert "Could not save" in response.json()["error"]
    assert ledger.drivers == []


def test_route_rate_with_three_decimals_is_rejected(client):
    response = client.post(
        "/api/routes",
        json={"origin": "A", "destination": "B", "batta_rate": "10.125", "salary_rate": 0}
    )
    assert response.status_code == 422
    assert client.get("/api/routes").json() == []


def test_overlong_driver_fields_are_rejected(client):
    response = client.post("/api/drivers", json={"name": "R" * 101, "vehicle_id": "V1"})
    assert response.status_code == 422
    response = client.post("/api/drivers", json={"name": "Ravi", "vehicle_id": "V" * 51})
    assert response.status_code == 422
    assert client.get("/api/drivers").json() == []


def test_settlement_amount_serializes_like_other_money(client):
    """Settle responses and history both send amounts as decimal strings."""
    driver = create_driver(client)
    route = create_route(client, batta="10.12", salary="0.05")
    client.post("/api/trips", json={"driver_id": driver["id"], "route_id": route["id"]})

    settlement = client.post(f"/api/settlements/{driver['id']}/WEEKLY").json()["data"]
    history = client.get("/api/settlements").json()
    assert settlement["amount"] == "10.12"
    assert history[0]["amount"] == settlement["amount"]
    assert settlement["timestamp"].endswith(("Z", "+00:00"))
