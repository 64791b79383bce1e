from __future__ import annotations

from fastapi import APIRouter

from taxnarrate.services.tax_engine import registered_versions

router = APIRouter(tags=["health"])


@router.get("/live")
async def live() -> dict[str, str]:
    """Kubernetes-style liveness endpoint (no dependencies)."""
    return {"status": "alive"}


@router.get("/ready")
async def ready() -> dict[str, object]:
    """Ready once the tax policies have registered."""
    return {"status": "ready", "law_versions": [v.value for v in registered_versions()]}
