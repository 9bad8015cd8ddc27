"""
Filter applied to exercise list queries.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.models.category import ExerciseCategory
from domain.models.exercise_record import ExerciseRecord


@dataclass(frozen=True)
class ExerciseFilter:
    """
    Caller-supplied constraints narrowing a list query.

    Both date bounds are inclusive. Unset fields do not constrain the result,
    so ``ExerciseFilter()`` matches every record.
    """

    category: Optional[ExerciseCategory] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return self.category is None and self.start_date is None and self.end_date is None

    def matches(self, record: ExerciseRecord) -> bool:
        """Check a single record against every set constraint."""
        if self.category is not None and record.category != self.category:
            return False
        if self.start_date is not None and record.date < self.start_date:
            return False
        if self.end_date is not None and record.date > self.end_date:
            return False
        return True
