"""
FastAPI entrypoint for the DrivePay backend application.
"""
import logging
from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from drivepay import __version__
from drivepay.core.config import settings
from drivepay.core.utils import format_error
from drivepay.api.dependencies import get_ledger
from drivepay.api.router import api_router
from drivepay.db.backend import StoreWriteError
from drivepay.services.ledger_service import Ledger, open_ledger

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="DrivePay API",
    description="Driver compensation tracking: trips, batta, salary and settlements",
    version=__version__
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup() -> None:
    # Storage mode is chosen once here and never revisited
    app.state.ledger = open_ledger()


@app.exception_handler(StoreWriteError)
async def _store_write_error_handler(request: Request, exc: StoreWriteError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=format_error(f"{exc}. Nothing was changed, please try again.")
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "DrivePay API is running"}


@app.get("/health")
async def health(ledger: Ledger = Depends(get_ledger)):
    """Health check endpoint with the active storage mode."""
    return {"status": "healthy", "storage": ledger.mode.value, "label": ledger.mode.label}
