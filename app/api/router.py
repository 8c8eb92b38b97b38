"""
API router - aggregates all endpoint routers.
"""

from fastapi import APIRouter

from app.api.endpoints import (
    invoices,
    payments,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    invoices.router,
    prefix="/invoices",
    tags=["Invoices"],
)

api_router.include_router(
    payments.router,
    tags=["Payments"],
)
