"""
Category-grouped and overall statistics over a set of exercise records.

The aggregation is a pure function over a snapshot of records, so callers
decide where the snapshot comes from and tests need no storage.
"""

from typing import Dict, Iterable

from domain.models.category import ExerciseCategory
from domain.models.exercise_record import ExerciseRecord
from domain.models.stats import CategoryStats, ExerciseStats, OverallStats


class _Totals:
    __slots__ = ("count", "duration", "calories")

    def __init__(self) -> None:
        self.count = 0
        self.duration = 0
        self.calories = 0

    def add(self, record: ExerciseRecord) -> None:
        self.count += 1
        self.duration += record.duration
        self.calories += record.calories


def compute_exercise_stats(records: Iterable[ExerciseRecord]) -> ExerciseStats:
    """
    Aggregate records by category and overall.

    Only categories that occur in ``records`` appear in ``by_category``; they
    are ordered by ExerciseCategory declaration order. An empty input yields
    zero-valued overall totals and no groups.

    Examples:
        >>> stats = compute_exercise_stats([run_30_200, run_20_150, lift_45_300])
        >>> stats.overall.total_duration
        95
        >>> stats.by_category[0].avg_calories
        175.0
    """
    groups: Dict[ExerciseCategory, _Totals] = {c: _Totals() for c in ExerciseCategory}
    overall = _Totals()

    for record in records:
        groups[record.category].add(record)
        overall.add(record)

    by_category = [
        CategoryStats(
            category=category,
            total_exercises=totals.count,
            total_duration=totals.duration,
            total_calories=totals.calories,
            avg_duration=totals.duration / totals.count,
            avg_calories=totals.calories / totals.count,
        )
        for category, totals in groups.items()
        if totals.count
    ]

    return ExerciseStats(
        by_category=by_category,
        overall=OverallStats(
            total_exercises=overall.count,
            total_duration=overall.duration,
            total_calories=overall.calories,
        ),
    )
