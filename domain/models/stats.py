"""
Aggregate statistics over exercise records.

These values are derived on read and never persisted.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from domain.models.category import ExerciseCategory


class CategoryStats(BaseModel):
    """Totals and means for one observed category."""

    model_config = ConfigDict(populate_by_name=True)

    category: ExerciseCategory
    total_exercises: int = Field(..., ge=1, alias="totalExercises")
    total_duration: int = Field(..., ge=0, alias="totalDuration")
    total_calories: int = Field(..., ge=0, alias="totalCalories")
    avg_duration: float = Field(..., alias="avgDuration")
    avg_calories: float = Field(..., alias="avgCalories")


class OverallStats(BaseModel):
    """Totals across every record regardless of category."""

    model_config = ConfigDict(populate_by_name=True)

    total_exercises: int = Field(default=0, ge=0, alias="totalExercises")
    total_duration: int = Field(default=0, ge=0, alias="totalDuration")
    total_calories: int = Field(default=0, ge=0, alias="totalCalories")


class ExerciseStats(BaseModel):
    """Result of the stats query: per-category groups plus overall totals."""

    model_config = ConfigDict(populate_by_name=True)

    by_category: List[CategoryStats] = Field(default_factory=list, alias="byCategory")
    overall: OverallStats = Field(default_factory=OverallStats)

    def to_api(self) -> dict:
        """Serialise for an API response."""
        return self.model_dump(by_alias=True, mode="json")
