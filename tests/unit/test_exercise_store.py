"""
Unit tests for application/use_cases/exercise_store.py

Uses FakeExerciseRepository, so no database is involved.
"""

from datetime import datetime, timezone

import pytest

from application.exceptions import StorageError
from application.use_cases import ExerciseRecordStore
from domain.models import ExerciseCategory
from tests.fakes import FakeExerciseRepository, exercise_row

MISSING_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture
def repo() -> FakeExerciseRepository:
    return FakeExerciseRepository()


@pytest.fixture
def store(repo) -> ExerciseRecordStore:
    return ExerciseRecordStore(exercise_repo=repo)


def run_fields(**overrides):
    fields = {"name": "Morning Run", "duration": 30, "calories": 250, "category": "cardio"}
    fields.update(overrides)
    return fields


# =============================================================================
# create
# =============================================================================


@pytest.mark.unit
class TestCreate:
    """Tests for ExerciseRecordStore.create."""

    def test_create_then_get_returns_same_record(self, store):
        """A created record can be read back unchanged."""
        created = store.create(run_fields(notes="Easy pace", date="2024-01-15"))
        assert created.success

        fetched = store.get_by_id(created.record.id)
        assert fetched.success
        assert fetched.record == created.record

    def test_create_assigns_id_and_timestamps(self, store):
        """The store assigns identity and both timestamps."""
        record = store.create(run_fields()).record
        assert record.id
        assert record.created_at.tzinfo is not None
        assert record.updated_at == record.created_at

    def test_create_without_date_uses_creation_time(self, store):
        """An omitted date defaults to now."""
        before = datetime.now(timezone.utc)
        record = store.create(run_fields()).record
        after = datetime.now(timezone.utc)
        assert before <= record.date <= after

    def test_create_with_date_keeps_it(self, store):
        """A supplied date-only value is stored as midnight UTC."""
        record = store.create(run_fields(date="2024-01-15")).record
        assert record.date == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_create_coerces_form_strings(self, store):
        """Numeric strings from the form are stored as integers."""
        record = store.create(run_fields(duration="45", calories="300")).record
        assert record.duration == 45
        assert record.calories == 300

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"duration": 0}, "Duration must be at least 1 minute"),
            ({"duration": 601}, "Duration cannot exceed 600 minutes"),
            ({"calories": 6000}, "Calories cannot exceed 5000"),
            ({"calories": -1}, "Calories cannot be negative"),
            ({"name": "A"}, "Exercise name must be at least 2 characters"),
            ({"category": "invalid"}, "Category must be one of: cardio, strength, flexibility, sports"),
        ],
    )
    def test_create_rejects_out_of_range(self, store, repo, overrides, message):
        """Invalid input is reported and nothing is written."""
        result = store.create(run_fields(**overrides))
        assert not result.success
        assert result.error == "Validation Error"
        assert result.validation_errors == [message]
        assert not result.not_found
        assert repo.writes == 0
        assert repo.get_all() == []

    def test_create_ignores_client_supplied_identity(self, store):
        """id and timestamps in the input are not honoured."""
        record = store.create(run_fields(id="forged", createdAt="2000-01-01")).record
        assert record.id != "forged"
        assert record.created_at.year != 2000

    def test_create_propagates_storage_failure(self, store, repo):
        """Storage failures are not turned into validation results."""
        repo.fail_with("insert")
        with pytest.raises(StorageError):
            store.create(run_fields())


# =============================================================================
# get_by_id
# =============================================================================


@pytest.mark.unit
class TestGetById:
    """Tests for ExerciseRecordStore.get_by_id."""

    def test_missing_id_is_not_found(self, store):
        """An unknown id yields not_found."""
        result = store.get_by_id(MISSING_ID)
        assert not result.success
        assert result.not_found
        assert result.error == "Exercise not found"


# =============================================================================
# update
# =============================================================================


@pytest.mark.unit
class TestUpdate:
    """Tests for ExerciseRecordStore.update."""

    @pytest.fixture
    def existing(self, repo):
        row = exercise_row(
            record_id="ex-1",
            name="Bench Press",
            duration=45,
            calories=300,
            category="strength",
            date="2024-01-10T18:00:00+00:00",
            notes="3x10",
        )
        repo.seed([row])
        return row

    def test_partial_update_keeps_other_fields(self, store, existing):
        """Omitted fields keep their stored values."""
        result = store.update("ex-1", {"duration": 50})
        assert result.success
        record = result.record
        assert record.duration == 50
        assert record.name == "Bench Press"
        assert record.calories == 300
        assert record.category is ExerciseCategory.STRENGTH
        assert record.notes == "3x10"
        assert record.date == datetime(2024, 1, 10, 18, 0, tzinfo=timezone.utc)

    def test_update_is_visible_on_read(self, store, existing):
        """A successful update is what get returns afterwards."""
        store.update("ex-1", {"name": "Incline Bench"})
        assert store.get_by_id("ex-1").record.name == "Incline Bench"

    def test_update_advances_updated_at(self, store, existing):
        """updated_at moves forward; created_at does not."""
        before = store.get_by_id("ex-1").record
        after = store.update("ex-1", {"calories": 320}).record
        assert after.created_at == before.created_at
        assert after.updated_at >= before.updated_at

    def test_invalid_category_leaves_record_unchanged(self, store, repo, existing):
        """A rejected update writes nothing."""
        before = store.get_by_id("ex-1").record

        result = store.update("ex-1", {"category": "invalid", "duration": 60})

        assert not result.success
        assert result.validation_errors == [
            "Category must be one of: cardio, strength, flexibility, sports"
        ]
        assert repo.writes == 0
        assert store.get_by_id("ex-1").record == before

    def test_null_date_keeps_stored_date(self, store, existing):
        """date: null does not reset the date."""
        record = store.update("ex-1", {"date": None}).record
        assert record.date == datetime(2024, 1, 10, 18, 0, tzinfo=timezone.utc)

    def test_null_notes_clears_notes(self, store, existing):
        """notes: null removes the notes."""
        assert store.update("ex-1", {"notes": None}).record.notes is None

    def test_empty_body_is_a_no_op_update(self, store, existing):
        """No fields: the record is rewritten with its own values."""
        result = store.update("ex-1", {})
        assert result.success
        assert result.record.name == "Bench Press"

    def test_missing_id_is_not_found(self, store, repo):
        """Existence is checked before validation."""
        result = store.update(MISSING_ID, {"category": "invalid"})
        assert result.not_found
        assert result.validation_errors == []
        assert repo.writes == 0


# =============================================================================
# delete_by_id
# =============================================================================


@pytest.mark.unit
class TestDeleteById:
    """Tests for ExerciseRecordStore.delete_by_id."""

    def test_delete_then_get_is_not_found(self, store):
        """A deleted record is gone."""
        record = store.create(run_fields()).record
        assert store.delete_by_id(record.id).success
        assert store.get_by_id(record.id).not_found

    def test_second_delete_is_not_found(self, store):
        """Deleting twice reports not_found the second time."""
        record = store.create(run_fields()).record
        assert store.delete_by_id(record.id).success

        second = store.delete_by_id(record.id)
        assert not second.success
        assert second.not_found

    def test_delete_only_removes_target(self, store, repo):
        """Other records survive a delete."""
        keep = store.create(run_fields(name="Keep me")).record
        drop = store.create(run_fields(name="Drop me")).record
        store.delete_by_id(drop.id)
        assert [row["id"] for row in repo.get_all()] == [keep.id]

    def test_delete_propagates_storage_failure(self, store, repo):
        """A failed delete is never reported as not_found."""
        record = store.create(run_fields()).record
        repo.fail_with("delete")
        with pytest.raises(StorageError):
            store.delete_by_id(record.id)
