"""
Exercises router for exercise record CRUD, filtering and statistics.

This router provides endpoints for:
- Listing exercise records, optionally filtered by category and date range
- Creating, reading, updating and deleting single records
- Aggregate statistics (per category and overall)
- Category display metadata for clients

All responses use the envelope in api.schemas.envelope.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from fastapi.responses import JSONResponse

from api.deps import get_exercise_query_service, get_exercise_store
from api.schemas import ExerciseFieldsDoc, api_response, error_response
from application.use_cases import (
    ExerciseQueryService,
    ExerciseRecordResult,
    ExerciseRecordStore,
)
from domain.models import ExerciseCategory, all_category_displays
from domain.validation import parse_exercise_filter

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/exercises",
    tags=["Exercises"],
)

_FIELDS_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": ExerciseFieldsDoc.model_json_schema()}},
    }
}


def _failure(result: ExerciseRecordResult) -> JSONResponse:
    """Map a failed store result to its HTTP response."""
    if result.not_found:
        return error_response(404, result.error)
    return error_response(400, result.error, errors=result.validation_errors)


# =============================================================================
# Query Endpoints
# =============================================================================


@router.get("")
def list_exercises(
    category: Optional[str] = Query(
        None,
        description="Restrict to one category",
        json_schema_extra={"enum": ExerciseCategory.values()},
    ),
    start_date: Optional[str] = Query(
        None,
        alias="startDate",
        description="Include records dated on or after this ISO date/date-time",
    ),
    end_date: Optional[str] = Query(
        None,
        alias="endDate",
        description="Include records dated on or before this ISO date/date-time",
    ),
    queries: ExerciseQueryService = Depends(get_exercise_query_service),
) -> JSONResponse:
    """
    List exercise records, most recent first.

    Filters combine with AND logic; both date bounds are inclusive.
    Returns an empty list when nothing matches.
    """
    parsed = parse_exercise_filter(category, start_date, end_date)
    if not parsed.is_valid:
        return error_response(400, "Validation Error", errors=parsed.errors)

    result = queries.list(parsed.filter)
    return api_response(
        success=True,
        count=result.count,
        data=[record.to_api() for record in result.records],
    )


@router.get("/stats/summary")
def get_exercise_stats(
    queries: ExerciseQueryService = Depends(get_exercise_query_service),
) -> JSONResponse:
    """
    Aggregate statistics.

    ``byCategory`` lists only categories that have records; ``overall`` is
    always present and zero-valued for an empty store.
    """
    stats = queries.stats()
    return api_response(success=True, data=stats.to_api())


@router.get("/categories")
def list_categories() -> JSONResponse:
    """Category values with their label, icon and colours."""
    categories = [display.model_dump(mode="json") for display in all_category_displays()]
    return api_response(success=True, count=len(categories), data=categories)


# =============================================================================
# Record Endpoints
# =============================================================================


@router.get("/{exercise_id}")
def get_exercise(
    exercise_id: str = Path(..., min_length=1, description="Exercise record ID"),
    store: ExerciseRecordStore = Depends(get_exercise_store),
) -> JSONResponse:
    """Get a single exercise record by ID."""
    result = store.get_by_id(exercise_id)
    if not result.success:
        return _failure(result)
    return api_response(success=True, data=result.record.to_api())


@router.post("", openapi_extra=_FIELDS_BODY)
def create_exercise(
    fields: Dict[str, Any] = Body(...),
    store: ExerciseRecordStore = Depends(get_exercise_store),
) -> JSONResponse:
    """
    Create an exercise record.

    ``date`` defaults to the creation time. Every violated constraint is
    reported in ``errors``; nothing is stored unless all pass.
    """
    result = store.create(fields)
    if not result.success:
        return _failure(result)
    return api_response(
        201,
        success=True,
        message="Exercise created successfully",
        data=result.record.to_api(),
    )


@router.put("/{exercise_id}", openapi_extra=_FIELDS_BODY)
def update_exercise(
    exercise_id: str = Path(..., min_length=1, description="Exercise record ID"),
    fields: Dict[str, Any] = Body(...),
    store: ExerciseRecordStore = Depends(get_exercise_store),
) -> JSONResponse:
    """
    Update an exercise record.

    Omitted fields keep their stored values. The merged record must satisfy
    every constraint or nothing is written.
    """
    result = store.update(exercise_id, fields)
    if not result.success:
        return _failure(result)
    return api_response(
        success=True,
        message="Exercise updated successfully",
        data=result.record.to_api(),
    )


@router.delete("/{exercise_id}")
def delete_exercise(
    exercise_id: str = Path(..., min_length=1, description="Exercise record ID"),
    store: ExerciseRecordStore = Depends(get_exercise_store),
) -> JSONResponse:
    """Permanently delete an exercise record."""
    result = store.delete_by_id(exercise_id)
    if not result.success:
        return _failure(result)
    return api_response(success=True, message="Exercise deleted successfully")
