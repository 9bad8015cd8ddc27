"""
Exercise request documentation models.

Request bodies are accepted as plain JSON objects and validated by
``domain.validation`` so that every violated constraint is reported as a
readable message. This model only documents the accepted fields in OpenAPI.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class ExerciseFieldsDoc(BaseModel):
    """Fields accepted by POST and PUT /api/exercises."""

    name: Optional[str] = Field(None, description="2-100 characters, trimmed", examples=["Morning Run"])
    duration: Optional[Union[int, str]] = Field(None, description="Whole minutes, 1-600", examples=[30])
    calories: Optional[Union[int, str]] = Field(None, description="Whole number, 0-5000", examples=[250])
    date: Optional[str] = Field(
        None,
        description="ISO-8601 date or date-time; defaults to now on create",
        examples=["2024-05-01"],
    )
    category: Optional[str] = Field(
        None,
        description="One of: cardio, strength, flexibility, sports",
        examples=["cardio"],
    )
    notes: Optional[str] = Field(None, description="Up to 500 characters")
