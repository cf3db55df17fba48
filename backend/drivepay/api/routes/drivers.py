"""
Driver roster routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List
from drivepay.api.dependencies import get_ledger
from drivepay.core.utils import format_response
from drivepay.schemas.driver import Driver, DriverCreate
from drivepay.schemas.settlement import DriverPendingResponse
from drivepay.services.ledger_service import Ledger

router = APIRouter(prefix="/drivers", tags=["drivers"])


def get_driver_or_404(driver_id: str, ledger: Ledger) -> Driver:
    driver = ledger.get_driver(driver_id)
    if not driver:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Driver not found"
        )
    return driver


@router.get("", response_model=List[Driver])
async def list_drivers(ledger: Ledger = Depends(get_ledger)):
    """List the driver roster."""
    return ledger.drivers


@router.post("", response_model=Driver, status_code=status.HTTP_201_CREATED)
async def register_driver(
    driver_data: DriverCreate,
    ledger: Ledger = Depends(get_ledger)
):
    """Register a new driver."""
    driver = ledger.add_driver(driver_data)
    if driver is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Driver name and vehicle are required"
        )
    return driver


@router.get("/{driver_id}/pending", response_model=DriverPendingResponse)
async def get_pending(driver_id: str, ledger: Ledger = Depends(get_ledger)):
    """Pending batta and salary for one driver."""
    driver = get_driver_or_404(driver_id, ledger)
    return ledger.driver_pending(driver)


@router.delete("/{driver_id}")
async def remove_driver(
    driver_id: str,
    confirm: bool = Query(False, description="Must be true; removal cannot be undone"),
    ledger: Ledger = Depends(get_ledger)
):
    """Remove a driver. Logged trips and settlements are kept."""
    get_driver_or_404(driver_id, ledger)
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Remove this driver? This action cannot be undone. Repeat with confirm=true."
        )
    ledger.remove_driver(driver_id)
    return format_response({"id": driver_id}, message="Driver removed")
