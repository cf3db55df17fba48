"""
Settlement routes.
"""
from fastapi import APIRouter, Depends
from typing import List
from drivepay.api.dependencies import get_ledger
from drivepay.api.routes.drivers import get_driver_or_404
from drivepay.core.utils import format_money, format_response
from drivepay.models.settlement import SettlementType
from drivepay.schemas.settlement import SettleResponse, SettlementHistoryItem
from drivepay.services.ledger_service import Ledger

router = APIRouter(prefix="/settlements", tags=["settlements"])


@router.get("", response_model=List[SettlementHistoryItem])
async def list_settlements(ledger: Ledger = Depends(get_ledger)):
    """Settlement history, newest first."""
    return ledger.settlement_history()


@router.post("/{driver_id}/{settlement_type}", response_model=SettleResponse)
async def settle_driver(
    driver_id: str,
    settlement_type: SettlementType,
    ledger: Ledger = Depends(get_ledger)
):
    """Settle everything pending for a driver in the weekly or monthly cycle."""
    get_driver_or_404(driver_id, ledger)

    settlement = ledger.settle(driver_id, settlement_type)
    if settlement is None:
        return format_response(None, message="Nothing pending to settle")
    return format_response(
        settlement,
        message=f"Settled {format_money(settlement.amount)}"
    )
