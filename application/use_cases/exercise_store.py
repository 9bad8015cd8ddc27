"""
Exercise Record Store use case.

Owns schema enforcement for exercise records: every create and update is
validated in full before anything is written, and every mutation goes
through the repository port.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from application.ports import ExerciseRepository
from domain.converters import draft_to_row, record_to_fields
from domain.models import ExerciseRecord
from domain.validation import editable_fields, validate_exercise_fields

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Exercise not found"
VALIDATION_MESSAGE = "Validation Error"


@dataclass
class ExerciseRecordResult:
    """
    Result of a store operation.

    Exactly one of these holds:
    - success: ``record`` is set (None after a delete)
    - not_found: the referenced id does not exist
    - validation_errors is non-empty: input violated one or more constraints
    """

    success: bool
    record: Optional[ExerciseRecord] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    not_found: bool = False

    @classmethod
    def missing(cls) -> "ExerciseRecordResult":
        return cls(success=False, error=NOT_FOUND_MESSAGE, not_found=True)

    @classmethod
    def invalid(cls, errors: List[str]) -> "ExerciseRecordResult":
        return cls(success=False, error=VALIDATION_MESSAGE, validation_errors=list(errors))


class ExerciseRecordStore:
    """
    Use case for creating, reading, updating and deleting exercise records.

    Validation and not-found outcomes are returned as ExerciseRecordResult.
    Storage failures propagate as StorageError from the repository.

    Usage:
        >>> store = ExerciseRecordStore(exercise_repo=repo)
        >>> result = store.create({"name": "Run", "duration": 30,
        ...                        "calories": 250, "category": "cardio"})
        >>> if result.success:
        ...     print(result.record.id)
    """

    def __init__(self, exercise_repo: ExerciseRepository) -> None:
        """
        Initialize with required dependencies.

        Args:
            exercise_repo: Repository for exercise persistence
        """
        self._exercise_repo = exercise_repo

    def create(self, fields: Mapping[str, Any]) -> ExerciseRecordResult:
        """
        Validate and persist a new record.

        Args:
            fields: Raw input fields (name, duration, calories, date,
                    category, notes). Other keys are ignored.

        Returns:
            ExerciseRecordResult with the stored record, or validation errors
        """
        validation = validate_exercise_fields(fields)
        if not validation.is_valid:
            logger.warning("Exercise create rejected: %s", validation.errors)
            return ExerciseRecordResult.invalid(validation.errors)

        record = self._exercise_repo.insert(draft_to_row(validation.draft))
        logger.info("Exercise %s created (%s)", record.id, record.category.value)
        return ExerciseRecordResult(success=True, record=record)

    def get_by_id(self, record_id: str) -> ExerciseRecordResult:
        """
        Look up a single record.

        Args:
            record_id: Record identifier

        Returns:
            ExerciseRecordResult with the record, or not_found
        """
        record = self._exercise_repo.get(record_id)
        if record is None:
            return ExerciseRecordResult.missing()
        return ExerciseRecordResult(success=True, record=record)

    def update(self, record_id: str, fields: Mapping[str, Any]) -> ExerciseRecordResult:
        """
        Merge supplied fields into an existing record and persist if valid.

        Existence is checked before validation. The merged record is validated
        against the full rule set, so a partial update cannot leave a stored
        record in an invalid state. ``date: null`` keeps the stored date;
        ``notes: null`` clears the notes.

        Args:
            record_id: Record identifier
            fields: Fields to replace; omitted fields keep their stored values

        Returns:
            ExerciseRecordResult with the updated record, not_found, or
            validation errors (in which case nothing is written)
        """
        existing = self._exercise_repo.get(record_id)
        if existing is None:
            return ExerciseRecordResult.missing()

        merged: Dict[str, Any] = record_to_fields(existing)
        for key, value in editable_fields(fields):
            if key == "date" and value is None:
                continue
            merged[key] = value

        validation = validate_exercise_fields(merged)
        if not validation.is_valid:
            logger.warning("Exercise %s update rejected: %s", record_id, validation.errors)
            return ExerciseRecordResult.invalid(validation.errors)

        record = self._exercise_repo.update(record_id, draft_to_row(validation.draft))
        if record is None:
            # Deleted between the lookup and the write.
            return ExerciseRecordResult.missing()

        logger.info("Exercise %s updated", record_id)
        return ExerciseRecordResult(success=True, record=record)

    def delete_by_id(self, record_id: str) -> ExerciseRecordResult:
        """
        Permanently delete a record.

        Deleting an id that does not exist (including a second delete of the
        same id) returns not_found rather than raising.

        Args:
            record_id: Record identifier

        Returns:
            ExerciseRecordResult with success, or not_found
        """
        if not self._exercise_repo.delete(record_id):
            logger.info("Exercise %s not found for delete", record_id)
            return ExerciseRecordResult.missing()

        logger.info("Exercise %s deleted", record_id)
        return ExerciseRecordResult(success=True)
