"""
Shared API dependencies.
"""
from fastapi import Request
from drivepay.services.ledger_service import Ledger


def get_ledger(request: Request) -> Ledger:
    """Dependency returning the ledger opened at startup."""
    return request.app.state.ledger
