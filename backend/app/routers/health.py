"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from app.database.collections import ALL_COLLECTIONS
from app.database.connections import get_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with collection files",
)
async def readiness_check():
    """
    Readiness check that verifies every collection document can be read.
    """
    checks = {"api": "healthy"}

    try:
        store = await get_store()
        for collection in ALL_COLLECTIONS:
            document = await store.load(collection)
            checks[collection] = "healthy" if document is not None else "missing"
    except Exception as e:
        checks["store"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
