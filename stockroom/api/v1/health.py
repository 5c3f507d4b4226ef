"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints.

==============================================================================
"""

from fastapi import APIRouter, Request


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, request: Request):
        self._state = request.app.state

    def check_catalog(self) -> dict:
        """Check catalog status."""
        manager = getattr(self._state, "catalog_manager", None)
        if manager is not None:
            return {"status": "healthy", "products": len(manager.catalog)}
        return {"status": "not_loaded", "products": 0}

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()
        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": catalog_info["products"]
            }
        }


@router.get("")
async def health_check(request: Request):
    """Health check endpoint."""
    return HealthController(request).get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe."""
    return {"alive": True}
