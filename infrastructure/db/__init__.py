"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. The table schema lives in
``migrations/``.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseExerciseRepository

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repository with injected client
    exercise_repo = SupabaseExerciseRepository(client)
"""

from infrastructure.db.exercise_repository import SupabaseExerciseRepository

__all__ = [
    # Exercise record persistence
    "SupabaseExerciseRepository",
]
