"""
Domain converters between storage rows and the ExerciseRecord model.

- row_to_exercise_record: Database row (from Supabase) -> ExerciseRecord
- draft_to_row: ExerciseDraft -> column values for insert/update
- record_to_fields: ExerciseRecord -> editable field mapping (for merging updates)

All converters are pure functions with no side effects.
"""

from domain.converters.exercise_converters import (
    draft_to_row,
    record_to_fields,
    row_to_exercise_record,
)

__all__ = [
    "row_to_exercise_record",
    "draft_to_row",
    "record_to_fields",
]
