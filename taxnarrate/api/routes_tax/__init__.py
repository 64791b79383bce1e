"""
Tax API Routes Module.

All routes are prefixed with /tax.

Sub-modules:
- personal: PAYE breakdown, 2025 figure and law comparison
- business: CIT, installment plans and penalties
- bands: band table lookup
"""
from __future__ import annotations

from fastapi import APIRouter

from .bands import router as bands_router
from .business import router as business_router
from .personal import router as personal_router

# Main router with /tax prefix
router = APIRouter(prefix="/tax", tags=["tax"])

# Include all sub-routers
router.include_router(personal_router)
router.include_router(business_router)
router.include_router(bands_router)

__all__ = ["router"]
