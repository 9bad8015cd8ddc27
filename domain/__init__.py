"""
Domain layer for the E-Tracker API.

This package contains pure domain models, validation and aggregation that
are independent of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ExerciseCategory,
    ExerciseDraft,
    ExerciseFilter,
    ExerciseRecord,
    ExerciseStats,
)

__all__ = [
    "ExerciseCategory",
    "ExerciseDraft",
    "ExerciseFilter",
    "ExerciseRecord",
    "ExerciseStats",
]
