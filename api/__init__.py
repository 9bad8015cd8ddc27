"""
API package for the E-Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- schemas/: Response envelope and request documentation models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_exercise_repo,
    get_exercise_store,
    get_exercise_query_service,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_exercise_repo",
    # Use cases
    "get_exercise_store",
    "get_exercise_query_service",
]
