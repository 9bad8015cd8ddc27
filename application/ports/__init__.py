"""
Repository Interfaces (Ports) for the E-Tracker API.

This package defines abstract interfaces that decouple the use cases from
infrastructure (database). Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ExerciseRepository

    class ExerciseRecordStore:
        def __init__(self, exercise_repo: ExerciseRepository):
            self._exercise_repo = exercise_repo
"""

from application.ports.exercise_repository import ExerciseRepository

__all__ = [
    "ExerciseRepository",
]
