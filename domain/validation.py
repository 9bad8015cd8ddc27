"""
Pure validation functions for exercise input.

Request bodies arrive loosely typed (the browser form posts numbers as
strings and dates as ``YYYY-MM-DD``). The functions here coerce and check
that input and return a tagged result instead of raising:

- validate_exercise_fields: raw mapping -> ExerciseDraft or error messages
- parse_exercise_filter: query-string values -> ExerciseFilter or error messages

Error messages are human readable, one per violated constraint, in field order.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Any, List, Mapping, Optional, Tuple

from domain.models.category import ExerciseCategory
from domain.models.exercise_record import (
    CALORIES_MAX,
    CALORIES_MIN,
    DURATION_MAX,
    DURATION_MIN,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NOTES_MAX_LENGTH,
    ExerciseDraft,
)
from domain.models.filter import ExerciseFilter

_CATEGORY_CHOICES = ", ".join(ExerciseCategory.values())

# Fields accepted from callers. Anything else (id, timestamps, typos) is ignored.
EDITABLE_FIELDS = ("name", "duration", "calories", "date", "category", "notes")


@dataclass
class FieldValidationResult:
    """Outcome of validating one set of exercise fields."""

    is_valid: bool
    draft: Optional[ExerciseDraft] = None
    errors: List[str] = field(default_factory=list)


@dataclass
class FilterParseResult:
    """Outcome of parsing list-query parameters."""

    is_valid: bool
    filter: ExerciseFilter = field(default_factory=ExerciseFilter)
    errors: List[str] = field(default_factory=list)


# =============================================================================
# Coercion helpers
# =============================================================================


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a date/time value into an aware UTC datetime.

    Accepts datetime, date, and ISO-8601 strings (a trailing ``Z`` is allowed).
    Date-only values mean midnight UTC; naive datetimes are taken as UTC.
    Returns None when the value cannot be interpreted.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce whole numbers, integral floats and integer strings; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# =============================================================================
# Field validators
# =============================================================================


def _validate_name(value: Any, errors: List[str]) -> Optional[str]:
    if _is_missing(value):
        errors.append("Exercise name is required")
        return None
    if not isinstance(value, str):
        errors.append("Exercise name must be text")
        return None
    name = value.strip()
    if len(name) < NAME_MIN_LENGTH:
        errors.append(f"Exercise name must be at least {NAME_MIN_LENGTH} characters")
        return None
    if len(name) > NAME_MAX_LENGTH:
        errors.append(f"Exercise name cannot exceed {NAME_MAX_LENGTH} characters")
        return None
    return name


def _validate_duration(value: Any, errors: List[str]) -> Optional[int]:
    if _is_missing(value):
        errors.append("Duration is required")
        return None
    duration = _coerce_int(value)
    if duration is None:
        errors.append("Duration must be a whole number of minutes")
        return None
    if duration < DURATION_MIN:
        errors.append(f"Duration must be at least {DURATION_MIN} minute")
        return None
    if duration > DURATION_MAX:
        errors.append(f"Duration cannot exceed {DURATION_MAX} minutes")
        return None
    return duration


def _validate_calories(value: Any, errors: List[str]) -> Optional[int]:
    if _is_missing(value):
        errors.append("Calories are required")
        return None
    calories = _coerce_int(value)
    if calories is None:
        errors.append("Calories must be a whole number")
        return None
    if calories < CALORIES_MIN:
        errors.append("Calories cannot be negative")
        return None
    if calories > CALORIES_MAX:
        errors.append(f"Calories cannot exceed {CALORIES_MAX}")
        return None
    return calories


def _validate_date(value: Any, errors: List[str]) -> Optional[datetime]:
    if _is_missing(value):
        return None
    parsed = parse_datetime(value)
    if parsed is None:
        errors.append("Date must be a valid date")
    return parsed


def _validate_category(value: Any, errors: List[str]) -> Optional[ExerciseCategory]:
    if _is_missing(value):
        errors.append("Category is required")
        return None
    try:
        return ExerciseCategory(value)
    except ValueError:
        errors.append(f"Category must be one of: {_CATEGORY_CHOICES}")
        return None


def _validate_notes(value: Any, errors: List[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        errors.append("Notes must be text")
        return None
    if len(value) > NOTES_MAX_LENGTH:
        errors.append(f"Notes cannot exceed {NOTES_MAX_LENGTH} characters")
        return None
    return value or None


# =============================================================================
# Public API
# =============================================================================


def validate_exercise_fields(fields: Mapping[str, Any]) -> FieldValidationResult:
    """
    Validate a complete set of exercise fields.

    Used for create and, after merging onto the stored record, for update.
    Every field is checked so the caller gets all messages at once.

    Args:
        fields: Raw field mapping (keys outside EDITABLE_FIELDS are ignored)

    Returns:
        FieldValidationResult with a typed draft on success, messages otherwise
    """
    errors: List[str] = []

    name = _validate_name(fields.get("name"), errors)
    duration = _validate_duration(fields.get("duration"), errors)
    calories = _validate_calories(fields.get("calories"), errors)
    when = _validate_date(fields.get("date"), errors)
    category = _validate_category(fields.get("category"), errors)
    notes = _validate_notes(fields.get("notes"), errors)

    if errors:
        return FieldValidationResult(is_valid=False, errors=errors)

    return FieldValidationResult(
        is_valid=True,
        draft=ExerciseDraft(
            name=name,
            duration=duration,
            calories=calories,
            category=category,
            date=when,
            notes=notes,
        ),
    )


def _parse_bound(value: Optional[str], label: str, errors: List[str]) -> Optional[datetime]:
    if _is_missing(value):
        return None
    parsed = parse_datetime(value)
    if parsed is None:
        errors.append(f"{label} must be a valid date")
    return parsed


def parse_exercise_filter(
    category: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> FilterParseResult:
    """
    Build an ExerciseFilter from query-string values.

    Blank values are treated as absent. An unknown category or an unparseable
    date is reported rather than silently matching nothing.
    """
    errors: List[str] = []

    parsed_category: Optional[ExerciseCategory] = None
    if not _is_missing(category):
        try:
            parsed_category = ExerciseCategory(category.strip())
        except ValueError:
            errors.append(f"Category filter must be one of: {_CATEGORY_CHOICES}")

    start = _parse_bound(start_date, "startDate", errors)
    end = _parse_bound(end_date, "endDate", errors)

    if errors:
        return FilterParseResult(is_valid=False, errors=errors)

    return FilterParseResult(
        is_valid=True,
        filter=ExerciseFilter(category=parsed_category, start_date=start, end_date=end),
    )


def editable_fields(fields: Mapping[str, Any]) -> Tuple[Tuple[str, Any], ...]:
    """Return the (key, value) pairs of a mapping that callers may set."""
    return tuple((k, fields[k]) for k in EDITABLE_FIELDS if k in fields)
