"""
Route catalog routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from drivepay.api.dependencies import get_ledger
from drivepay.core.utils import format_response
from drivepay.schemas.route import Route, RouteCreate
from drivepay.services.ledger_service import Ledger

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("", response_model=List[Route])
async def list_routes(ledger: Ledger = Depends(get_ledger)):
    """List all routes with their rates."""
    return ledger.routes


@router.post("", response_model=Route, status_code=status.HTTP_201_CREATED)
async def create_route(
    route_data: RouteCreate,
    ledger: Ledger = Depends(get_ledger)
):
    """Define a new route."""
    route = ledger.add_route(route_data)
    if route is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Route origin and destination are required"
        )
    return route


@router.delete("/{route_id}")
async def remove_route(route_id: str, ledger: Ledger = Depends(get_ledger)):
    """Remove a route. Trips on it stop contributing to pending amounts."""
    if not ledger.remove_route(route_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Route not found"
        )
    return format_response({"id": route_id}, message="Route removed")
