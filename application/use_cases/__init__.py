"""
Application Use Cases for the E-Tracker API.

This package contains application-level use cases that orchestrate domain
logic and coordinate with repository ports:

- ExerciseRecordStore: create / get / update / delete with validation
- ExerciseQueryService: filtered listing and aggregate statistics

Dependencies are injected via constructors for testability, and use cases
return domain models and result objects, not API responses.

Usage:
    from application.use_cases import ExerciseRecordStore, ExerciseQueryService

    store = ExerciseRecordStore(exercise_repo=exercise_repo)
    result = store.create({"name": "Evening Yoga", "duration": 45,
                           "calories": 120, "category": "flexibility"})

    queries = ExerciseQueryService(exercise_repo=exercise_repo)
    stats = queries.stats()
"""

from application.use_cases.exercise_store import (
    ExerciseRecordResult,
    ExerciseRecordStore,
)
from application.use_cases.exercise_query import (
    ExerciseQueryService,
    ListExercisesResult,
)

__all__ = [
    # Store
    "ExerciseRecordStore",
    "ExerciseRecordResult",
    # Query & stats
    "ExerciseQueryService",
    "ListExercisesResult",
]
