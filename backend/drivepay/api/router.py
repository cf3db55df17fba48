"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from drivepay.api.routes import dashboard, drivers, routes, trips, settlements

api_router = APIRouter()

# Include all route modules
api_router.include_router(dashboard.router)
api_router.include_router(drivers.router)
api_router.include_router(routes.router)
api_router.include_router(trips.router)
api_router.include_router(settlements.router)
