"""
Supabase implementation of ExerciseRepository.

This module provides the concrete Supabase implementation for exercise
record persistence. The client is injected via constructor for testability.

Every method either returns a real answer or raises StorageError. A failed
write or delete is never reported as success or as "not found".
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import StorageError
from domain.converters import row_to_exercise_record
from domain.models import ExerciseFilter, ExerciseRecord

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "exercises"

# PostgREST caps each response at max_rows (1000 by default on Supabase)
DEFAULT_PAGE_SIZE = 1000


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.

    All Supabase query logic for exercise records is encapsulated here.
    Filtering and ordering are pushed down to PostgREST (eq/gte/lte and
    ``order date desc``, backed by the ``exercises_date_idx`` index).
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE, page_size: int = DEFAULT_PAGE_SIZE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Table holding exercise rows
            page_size: Rows fetched per request when listing; must not exceed
                       the server's max_rows or pages will come back short
        """
        self._client = client
        self._table = table
        self._page_size = page_size

    def _query(self):
        return self._client.table(self._table)

    @staticmethod
    def _is_valid_id(record_id: str) -> bool:
        """IDs are UUIDs; anything else cannot match a row."""
        try:
            uuid.UUID(str(record_id))
        except ValueError:
            return False
        return True

    @staticmethod
    def _first(result: Any) -> Optional[Dict[str, Any]]:
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def insert(self, row: Dict[str, Any]) -> ExerciseRecord:
        """Insert a new exercise row."""
        now = datetime.now(timezone.utc).isoformat()
        data = {
            **row,
            "created_at": now,
            "updated_at": now,
        }
        data.setdefault("date", now)

        try:
            result = self._query().insert(data).execute()
            stored = self._first(result)
            if stored is None:
                raise StorageError("insert", "Insert returned no row")
            return row_to_exercise_record(stored)
        except StorageError:
            raise
        except Exception as e:
            logger.exception("Failed to insert exercise")
            raise StorageError("insert") from e

    def get(self, record_id: str) -> Optional[ExerciseRecord]:
        """Get a single exercise by ID."""
        if not self._is_valid_id(record_id):
            return None
        try:
            result = self._query().select("*").eq("id", record_id).limit(1).execute()
            stored = self._first(result)
            return row_to_exercise_record(stored) if stored else None
        except Exception as e:
            logger.exception(f"Failed to get exercise {record_id}")
            raise StorageError("get") from e

    def update(self, record_id: str, row: Dict[str, Any]) -> Optional[ExerciseRecord]:
        """Update an exercise row in place."""
        if not self._is_valid_id(record_id):
            return None
        data = {
            **row,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

        try:
            result = self._query().update(data).eq("id", record_id).execute()
            stored = self._first(result)
            if stored is None:
                logger.warning(f"No exercise found with id {record_id} (0 rows updated)")
                return None
            return row_to_exercise_record(stored)
        except Exception as e:
            logger.exception(f"Failed to update exercise {record_id}")
            raise StorageError("update") from e

    def delete(self, record_id: str) -> bool:
        """Delete an exercise row."""
        if not self._is_valid_id(record_id):
            return False
        try:
            result = self._query().delete().eq("id", record_id).execute()
        except Exception as e:
            logger.exception(f"Failed to delete exercise {record_id}")
            raise StorageError("delete") from e

        deleted_count = len(result.data) if result.data else 0
        if deleted_count > 0:
            logger.info(f"Exercise {record_id} deleted ({deleted_count} row(s))")
            return True
        return False

    def _filtered(self, exercise_filter: ExerciseFilter):
        query = self._query().select("*")

        if exercise_filter.category is not None:
            query = query.eq("category", exercise_filter.category.value)
        if exercise_filter.start_date is not None:
            query = query.gte("date", exercise_filter.start_date.isoformat())
        if exercise_filter.end_date is not None:
            query = query.lte("date", exercise_filter.end_date.isoformat())

        # id breaks date ties so pages do not overlap
        return query.order("date", desc=True).order("id")

    def list(self, exercise_filter: ExerciseFilter) -> List[ExerciseRecord]:
        """
        List exercises matching a filter, newest date first.

        Pages through the table with ``range`` until a short page comes
        back, so the result is not truncated at the server's row cap.
        """
        rows: List[Dict[str, Any]] = []
        offset = 0
        try:
            while True:
                result = self._filtered(exercise_filter) \
                    .range(offset, offset + self._page_size - 1) \
                    .execute()
                page = result.data or []
                rows.extend(page)
                if len(page) < self._page_size:
                    break
                offset += self._page_size

            return [row_to_exercise_record(row) for row in rows]
        except Exception as e:
            logger.exception("Failed to list exercises")
            raise StorageError("list") from e
