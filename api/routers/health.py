"""
Health check router.

This router provides the API index at ``/`` and a liveness endpoint for
monitoring and load balancers.
"""

import logging

from fastapi import APIRouter

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

router = APIRouter(
    tags=["Health"],
)


@router.get("/")
def index():
    """
    API index listing the main endpoints.

    Returns:
        dict: Service name, version and endpoint paths
    """
    return {
        "message": "E-Tracker API is running",
        "version": API_VERSION,
        "endpoints": {
            "exercises": "/api/exercises",
            "stats": "/api/exercises/stats/summary",
            "categories": "/api/exercises/categories",
        },
    }


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
