"""
Infrastructure Layer for the E-Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import SupabaseExerciseRepository

__all__ = [
    "SupabaseExerciseRepository",
]
