"""
Domain models for the E-Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):

- ExerciseRecord: The persisted exercise entity
- ExerciseDraft: Validated input for creating or replacing a record
- ExerciseCategory: Closed set of workout classifications
- ExerciseFilter: Constraints for list queries
- ExerciseStats: Derived per-category and overall aggregates

Usage:
    >>> from domain.models import ExerciseCategory, ExerciseFilter

    >>> cardio_only = ExerciseFilter(category=ExerciseCategory.CARDIO)
"""

from domain.models.category import (
    CategoryColors,
    CategoryDisplay,
    ExerciseCategory,
    all_category_displays,
    category_display,
)
from domain.models.exercise_record import ExerciseDraft, ExerciseRecord
from domain.models.filter import ExerciseFilter
from domain.models.stats import CategoryStats, ExerciseStats, OverallStats

__all__ = [
    # Main entities
    "ExerciseRecord",
    "ExerciseDraft",
    "ExerciseFilter",
    # Aggregates
    "ExerciseStats",
    "CategoryStats",
    "OverallStats",
    # Enums and display metadata
    "ExerciseCategory",
    "CategoryDisplay",
    "CategoryColors",
    "category_display",
    "all_category_displays",
]
