"""
Converters: database row format <-> domain ExerciseRecord.

Database schema (exercises table):
- id: UUID
- name: text
- duration: integer (minutes)
- calories: integer
- date: timestamptz
- category: text (cardio, strength, flexibility, sports)
- notes: text, nullable
- created_at, updated_at: timestamptz

All converters are pure functions with no side effects.
"""

from datetime import datetime
from typing import Any, Dict

from domain.models.exercise_record import ExerciseDraft, ExerciseRecord
from domain.validation import parse_datetime


def _require_datetime(row: Dict[str, Any], key: str) -> datetime:
    parsed = parse_datetime(row.get(key))
    if parsed is None:
        raise ValueError(f"Exercise row {row.get('id')!r} has invalid {key}: {row.get(key)!r}")
    return parsed


def row_to_exercise_record(row: Dict[str, Any]) -> ExerciseRecord:
    """
    Convert a database row to an ExerciseRecord.

    Timestamps are normalised to aware UTC datetimes so records from
    different sources compare correctly.

    Raises:
        ValueError: If a timestamp column cannot be parsed
        pydantic.ValidationError: If the row violates a field constraint
    """
    return ExerciseRecord(
        id=str(row["id"]),
        name=row.get("name"),
        duration=row.get("duration"),
        calories=row.get("calories"),
        date=_require_datetime(row, "date"),
        category=row.get("category"),
        notes=row.get("notes"),
        created_at=_require_datetime(row, "created_at"),
        updated_at=_require_datetime(row, "updated_at"),
    )


def draft_to_row(draft: ExerciseDraft) -> Dict[str, Any]:
    """
    Convert a validated draft to the column values it sets.

    ``date`` is only included when the draft carries one, leaving the
    repository to apply the creation-time default.
    """
    row: Dict[str, Any] = {
        "name": draft.name,
        "duration": draft.duration,
        "calories": draft.calories,
        "category": draft.category.value,
        "notes": draft.notes,
    }
    if draft.date is not None:
        row["date"] = draft.date.isoformat()
    return row


def record_to_fields(record: ExerciseRecord) -> Dict[str, Any]:
    """Editable fields of a stored record, as accepted by validation."""
    return {
        "name": record.name,
        "duration": record.duration,
        "calories": record.calories,
        "date": record.date,
        "category": record.category.value,
        "notes": record.notes,
    }
