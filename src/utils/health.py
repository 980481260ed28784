from typing import Dict, Any
import time

from src.core.exceptions import StoreError
from src.db.store import MembershipStore
from src.utils.logger import get_logger

logger = get_logger(__name__)

def check_store(store: MembershipStore) -> Dict[str, Any]:
    """Check that the membership store answers"""
    start_time = time.time()
    try:
        store.ping()
    except StoreError as e:
        logger.error(f"Store health check failed: {str(e)}")
        return {
            "status": "unhealthy",
            "error": str(e)
        }
    return {
        "status": "healthy",
        "latency_ms": round((time.time() - start_time) * 1000, 2)
    }
