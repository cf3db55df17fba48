"""
Trip logging routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional
from drivepay.api.dependencies import get_ledger
from drivepay.api.routes.drivers import get_driver_or_404
from drivepay.schemas.trip import Trip, TripCreate
from drivepay.services.ledger_service import Ledger

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=List[Trip])
async def list_trips(
    driver_id: Optional[str] = None,
    ledger: Ledger = Depends(get_ledger)
):
    """List logged trips, newest first."""
    trips = ledger.trips
    if driver_id:
        trips = [t for t in trips if t.driver_id == driver_id]
    return trips


@router.post("", response_model=Trip, status_code=status.HTTP_201_CREATED)
async def log_trip(
    trip_data: TripCreate,
    ledger: Ledger = Depends(get_ledger)
):
    """Log a trip for a driver on a route."""
    get_driver_or_404(trip_data.driver_id, ledger)
    if not ledger.get_route(trip_data.route_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Route not found"
        )
    return ledger.log_trip(trip_data)
