"""
ExerciseRecord - the persisted exercise entity.

Records are serialised to API clients with camelCase keys
(``createdAt``/``updatedAt``); Python code uses the snake_case attribute names.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.category import ExerciseCategory

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
DURATION_MIN = 1
DURATION_MAX = 600
CALORIES_MIN = 0
CALORIES_MAX = 5000
NOTES_MAX_LENGTH = 500


class ExerciseRecord(BaseModel):
    """
    A single logged exercise.

    Every instance read back from storage satisfies the field constraints
    enforced by ``domain.validation``; the model repeats them so that a
    corrupted row fails loudly instead of leaking out of the API.

    Examples:
        >>> record = ExerciseRecord(
        ...     id="0b7c...",
        ...     name="Morning Run",
        ...     duration=30,
        ...     calories=250,
        ...     date=datetime(2024, 5, 1, tzinfo=timezone.utc),
        ...     category=ExerciseCategory.CARDIO,
        ...     created_at=now,
        ...     updated_at=now,
        ... )
        >>> record.model_dump(by_alias=True, mode="json")["createdAt"]
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Opaque unique identifier assigned by the store")
    name: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    duration: int = Field(..., ge=DURATION_MIN, le=DURATION_MAX, description="Minutes")
    calories: int = Field(..., ge=CALORIES_MIN, le=CALORIES_MAX)
    date: datetime = Field(..., description="When the exercise took place")
    category: ExerciseCategory
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    def to_api(self) -> dict:
        """Serialise for an API response."""
        return self.model_dump(by_alias=True, mode="json")


@dataclass(frozen=True)
class ExerciseDraft:
    """
    Validated, typed input for creating or replacing a record.

    Produced only by ``domain.validation.validate_exercise_fields``. ``date``
    is None when the caller did not supply one; the store fills it in.
    """

    name: str
    duration: int
    calories: int
    category: ExerciseCategory
    date: Optional[datetime] = None
    notes: Optional[str] = None
