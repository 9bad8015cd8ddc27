"""
Exercise Repository Interface (Port).

This module defines the abstract interface for persisting exercise records.
Implementations may use Supabase or other backends.
"""
from typing import Any, Dict, List, Optional, Protocol

from domain.models import ExerciseFilter, ExerciseRecord


class ExerciseRepository(Protocol):
    """
    Abstract interface for exercise record persistence.

    Implementations assign ``id``, ``created_at`` and ``updated_at``. Each
    single-record write is atomic; nothing here spans multiple records.

    All methods raise ``application.exceptions.StorageError`` when the
    backend fails. A missing record is never an error.
    """

    def insert(self, row: Dict[str, Any]) -> ExerciseRecord:
        """
        Persist a new exercise record.

        Args:
            row: Column values (see domain.converters.draft_to_row). When
                 ``date`` is absent the creation time is used.

        Returns:
            The stored record with assigned id and timestamps
        """
        ...

    def get(self, record_id: str) -> Optional[ExerciseRecord]:
        """
        Get an exercise record by ID.

        Args:
            record_id: Record identifier

        Returns:
            The record or None if not found
        """
        ...

    def update(self, record_id: str, row: Dict[str, Any]) -> Optional[ExerciseRecord]:
        """
        Replace the editable columns of a record and bump ``updated_at``.

        Args:
            record_id: Record identifier
            row: Column values to write

        Returns:
            The updated record or None if it no longer exists
        """
        ...

    def delete(self, record_id: str) -> bool:
        """
        Permanently delete a record.

        Args:
            record_id: Record identifier

        Returns:
            True if a record was deleted, False if none existed
        """
        ...

    def list(self, exercise_filter: ExerciseFilter) -> List[ExerciseRecord]:
        """
        List records matching a filter, most recent ``date`` first.

        Args:
            exercise_filter: Category and inclusive date-range constraints

        Returns:
            Matching records (empty list when nothing matches)
        """
        ...
