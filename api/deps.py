"""
FastAPI Dependency Providers for the E-Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use-case providers create new instances per-request

Usage in routers:
    from api.deps import get_exercise_store
    from application.use_cases import ExerciseRecordStore

    @router.get("/exercises/{exercise_id}")
    def get_exercise(
        exercise_id: str,
        store: ExerciseRecordStore = Depends(get_exercise_store),
    ):
        return store.get_by_id(exercise_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_repo] = lambda: FakeExerciseRepository()
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import ExerciseRepository

# Use cases
from application.use_cases import ExerciseQueryService, ExerciseRecordStore

# Concrete implementations
from infrastructure import SupabaseExerciseRepository

from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured; exercise storage unavailable")
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    Returns a SupabaseExerciseRepository instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)
        settings: Application settings (injected)

    Returns:
        ExerciseRepository: Repository for exercise persistence
    """
    return SupabaseExerciseRepository(client, table=settings.exercises_table)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_exercise_store(
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ExerciseRecordStore:
    """
    Get the ExerciseRecordStore use case.

    Args:
        exercise_repo: Exercise repository (injected)

    Returns:
        ExerciseRecordStore: Validated create/get/update/delete
    """
    return ExerciseRecordStore(exercise_repo=exercise_repo)


def get_exercise_query_service(
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ExerciseQueryService:
    """
    Get the ExerciseQueryService use case.

    Args:
        exercise_repo: Exercise repository (injected)

    Returns:
        ExerciseQueryService: Filtered listing and statistics
    """
    return ExerciseQueryService(exercise_repo=exercise_repo)


# =============================================================================
# Exports
# =============================================================================

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
