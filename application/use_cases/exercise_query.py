"""
Exercise Query & Stats use case.

Read-only access to exercise records: filtered listing and aggregate
statistics. Nothing here mutates storage.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import ExerciseRepository
from domain.models import ExerciseFilter, ExerciseRecord, ExerciseStats
from domain.services import compute_exercise_stats

logger = logging.getLogger(__name__)


@dataclass
class ListExercisesResult:
    """Result of listing exercise records."""

    success: bool
    records: List[ExerciseRecord] = field(default_factory=list)
    count: int = 0
    error: Optional[str] = None


class ExerciseQueryService:
    """
    Use case for filtered listing and statistics.

    Stats are computed from one snapshot read at call time; they are not
    transactionally consistent with concurrent writes.
    """

    def __init__(self, exercise_repo: ExerciseRepository) -> None:
        """
        Initialize with required dependencies.

        Args:
            exercise_repo: Repository for exercise persistence
        """
        self._exercise_repo = exercise_repo

    def list(self, exercise_filter: Optional[ExerciseFilter] = None) -> ListExercisesResult:
        """
        List records matching a filter, most recent first.

        Args:
            exercise_filter: Category/date-range constraints; None matches all

        Returns:
            ListExercisesResult (an empty list when nothing matches)
        """
        exercise_filter = exercise_filter or ExerciseFilter()
        records = self._exercise_repo.list(exercise_filter)
        records = sorted(records, key=lambda r: r.date, reverse=True)
        return ListExercisesResult(success=True, records=records, count=len(records))

    def stats(self) -> ExerciseStats:
        """
        Compute per-category and overall statistics.

        Returns:
            ExerciseStats; zero-valued overall totals for an empty store
        """
        snapshot = self._exercise_repo.list(ExerciseFilter())
        stats = compute_exercise_stats(snapshot)
        logger.debug(
            "Computed stats over %d exercises in %d categories",
            stats.overall.total_exercises,
            len(stats.by_category),
        )
        return stats
