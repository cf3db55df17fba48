"""
Fleet overview route.
"""
from fastapi import APIRouter, Depends
from drivepay.api.dependencies import get_ledger
from drivepay.schemas.dashboard import FleetOverview
from drivepay.services.ledger_service import Ledger

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=FleetOverview)
async def get_overview(ledger: Ledger = Depends(get_ledger)):
    """Disbursed and pending totals plus drivers with money pending."""
    return ledger.overview()
