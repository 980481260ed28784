from fastapi import APIRouter, Depends, Response, status
from typing import Dict, Any

from src.api.dependencies import get_membership_store
from src.db.store import MembershipStore
from src.utils.health import check_store

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
def health_check() -> Dict[str, str]:
    """Basic health check"""
    return {"status": "healthy"}

@router.get("/ready")
def readiness_check(
    response: Response,
    store: MembershipStore = Depends(get_membership_store)
) -> Dict[str, Any]:
    """Readiness probe, fails while the membership store is unreachable"""
    store_status = check_store(store)
    if store_status["status"] != "healthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "not ready", "store": store_status}
    return {"status": "ready", "store": store_status}

@router.get("/live")
def liveness_check() -> Dict[str, str]:
    """Liveness probe for Kubernetes"""
    return {"status": "alive"}
