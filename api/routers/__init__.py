"""
Router package for the E-Tracker API.

This package contains all API routers organized by domain:
- health: API index and liveness check
- exercises: Exercise record CRUD, filtering, statistics and categories
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "exercises_router",
]
