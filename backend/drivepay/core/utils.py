"""
Utility functions for the application.
"""
from typing import Annotated, Any, Dict
from datetime import datetime, timezone
from decimal import Decimal
import uuid

from pydantic import AfterValidator

from drivepay.core.config import settings


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset) and convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


def new_id() -> str:
    """Generate a short random record identifier."""
    return uuid.uuid4().hex[:12]


def format_money(amount: Decimal) -> str:
    """Format an amount with the configured currency symbol, e.g. '₹1,250'."""
    value = Decimal(amount)
    if value == value.to_integral_value():
        return f"{settings.CURRENCY_SYMBOL}{int(value):,}"
    return f"{settings.CURRENCY_SYMBOL}{value:,.2f}"


def format_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    """Format API response."""
    return {
        "message": message,
        "data": data
    }


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
