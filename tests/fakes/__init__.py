"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeExerciseRepository, create_exercise_repo

    # Direct instantiation
    repo = FakeExerciseRepository()
    repo.seed([exercise_row(name="Run", category="cardio")])

    # Factory function with pre-populated data
    repo = create_exercise_repo(num_exercises=5)
"""
from typing import Any, Dict, Optional
import uuid
from datetime import datetime, timedelta, timezone

from domain.models import ExerciseCategory
from tests.fakes.exercise_repository import FakeExerciseRepository


# =============================================================================
# Factory Functions
# =============================================================================


def exercise_row(
    *,
    name: str = "Morning Run",
    duration: int = 30,
    calories: int = 250,
    category: str = "cardio",
    date: Optional[str] = None,
    notes: Optional[str] = None,
    record_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a stored exercise row with sensible defaults.

    Returns:
        Row dict in the exercises table column format
    """
    now = datetime.now(timezone.utc).isoformat()
    return {
        "id": record_id or str(uuid.uuid4()),
        "name": name,
        "duration": duration,
        "calories": calories,
        "category": category,
        "date": date or now,
        "notes": notes,
        "created_at": now,
        "updated_at": now,
    }


def create_exercise_repo(*, num_exercises: int = 0) -> FakeExerciseRepository:
    """
    Create a FakeExerciseRepository with optional pre-populated records.

    Records cycle through the categories and are dated one day apart,
    newest first, starting 2024-01-31.

    Args:
        num_exercises: Number of sample records to create

    Returns:
        Pre-populated FakeExerciseRepository
    """
    repo = FakeExerciseRepository()
    categories = list(ExerciseCategory)
    start = datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)

    rows = []
    for i in range(num_exercises):
        rows.append(exercise_row(
            name=f"Test Exercise {i + 1}",
            duration=10 + i,
            calories=100 + i * 10,
            category=categories[i % len(categories)].value,
            date=(start - timedelta(days=i)).isoformat(),
        ))
    repo.seed(rows)
    return repo


__all__ = [
    "FakeExerciseRepository",
    "exercise_row",
    "create_exercise_repo",
]
