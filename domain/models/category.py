"""
Exercise category enum and its display metadata.

The category set is closed: every record belongs to exactly one of the four
values below, and every mapping keyed by category covers all four.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class ExerciseCategory(str, Enum):
    """
    Workout classification for an exercise record.

    - CARDIO: Running, cycling, rowing and other endurance work
    - STRENGTH: Resistance training
    - FLEXIBILITY: Stretching, yoga, mobility
    - SPORTS: Team and racket sports, climbing, etc.
    """

    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    SPORTS = "sports"

    @classmethod
    def values(cls) -> List[str]:
        """All category values in declaration order."""
        return [c.value for c in cls]


class CategoryColors(BaseModel):
    """Background, text and border colours used when rendering a category."""

    bg: str
    text: str
    border: str


class CategoryDisplay(BaseModel):
    """Presentation metadata for one category."""

    category: ExerciseCategory
    label: str = Field(..., description="Human readable name")
    icon: str = Field(..., description="Icon identifier understood by the client")
    colors: CategoryColors


_CATEGORY_DISPLAY: Dict[ExerciseCategory, CategoryDisplay] = {
    ExerciseCategory.CARDIO: CategoryDisplay(
        category=ExerciseCategory.CARDIO,
        label="Cardio",
        icon="heart",
        colors=CategoryColors(bg="#fee2e2", text="#dc2626", border="#fca5a5"),
    ),
    ExerciseCategory.STRENGTH: CategoryDisplay(
        category=ExerciseCategory.STRENGTH,
        label="Strength",
        icon="dumbbell",
        colors=CategoryColors(bg="#dbeafe", text="#2563eb", border="#93c5fd"),
    ),
    ExerciseCategory.FLEXIBILITY: CategoryDisplay(
        category=ExerciseCategory.FLEXIBILITY,
        label="Flexibility",
        icon="zap",
        colors=CategoryColors(bg="#d1fae5", text="#059669", border="#6ee7b7"),
    ),
    ExerciseCategory.SPORTS: CategoryDisplay(
        category=ExerciseCategory.SPORTS,
        label="Sports",
        icon="activity",
        colors=CategoryColors(bg="#e9d5ff", text="#9333ea", border="#d8b4fe"),
    ),
}


def category_display(category: ExerciseCategory) -> CategoryDisplay:
    """Return the display metadata for a category."""
    return _CATEGORY_DISPLAY[category]


def all_category_displays() -> List[CategoryDisplay]:
    """Display metadata for every category, in declaration order."""
    return [_CATEGORY_DISPLAY[c] for c in ExerciseCategory]
