"""
Unit tests for application/use_cases/exercise_query.py
"""

from datetime import datetime, timezone

import pytest

from application.exceptions import StorageError
from application.use_cases import ExerciseQueryService
from domain.models import ExerciseCategory, ExerciseFilter
from tests.fakes import FakeExerciseRepository, create_exercise_repo, exercise_row


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def repo() -> FakeExerciseRepository:
    repo = FakeExerciseRepository()
    repo.seed([
        exercise_row(record_id="a", name="Run", category="cardio", duration=30, calories=200,
                     date="2024-01-01T00:00:00+00:00"),
        exercise_row(record_id="b", name="Bike", category="cardio", duration=20, calories=150,
                     date="2024-01-05T00:00:00+00:00"),
        exercise_row(record_id="c", name="Squats", category="strength", duration=45, calories=300,
                     date="2024-01-10T00:00:00+00:00"),
        exercise_row(record_id="d", name="Tennis", category="sports", duration=60, calories=500,
                     date="2030-06-01T00:00:00+00:00"),
    ])
    return repo


@pytest.fixture
def service(repo) -> ExerciseQueryService:
    return ExerciseQueryService(exercise_repo=repo)


@pytest.mark.unit
class TestList:
    """Tests for ExerciseQueryService.list."""

    def test_no_filter_returns_all_newest_first(self, service):
        """Records are ordered by date descending, future dates first."""
        result = service.list()
        assert result.success
        assert result.count == 4
        assert [r.id for r in result.records] == ["d", "c", "b", "a"]

    def test_category_filter(self, service):
        """Only the requested category is returned."""
        result = service.list(ExerciseFilter(category=ExerciseCategory.CARDIO))
        assert [r.id for r in result.records] == ["b", "a"]
        assert all(r.category is ExerciseCategory.CARDIO for r in result.records)

    def test_date_range_is_inclusive(self, service):
        """Records exactly on either bound are included."""
        result = service.list(ExerciseFilter(start_date=utc(2024, 1, 1), end_date=utc(2024, 1, 5)))
        assert [r.id for r in result.records] == ["b", "a"]

    def test_start_only(self, service):
        """A lone start bound is open-ended."""
        result = service.list(ExerciseFilter(start_date=utc(2024, 1, 6)))
        assert [r.id for r in result.records] == ["d", "c"]

    def test_end_only(self, service):
        """A lone end bound is open-ended."""
        result = service.list(ExerciseFilter(end_date=utc(2024, 1, 4)))
        assert [r.id for r in result.records] == ["a"]

    def test_filters_combine_with_and(self, service):
        """Category and date range must both match."""
        result = service.list(ExerciseFilter(
            category=ExerciseCategory.CARDIO,
            start_date=utc(2024, 1, 2),
        ))
        assert [r.id for r in result.records] == ["b"]

    def test_no_match_is_empty_not_error(self, service):
        """Nothing matching yields an empty successful result."""
        result = service.list(ExerciseFilter(category=ExerciseCategory.FLEXIBILITY))
        assert result.success
        assert result.records == []
        assert result.count == 0

    def test_count_matches_records(self):
        """count always equals the number of records returned."""
        service = ExerciseQueryService(exercise_repo=create_exercise_repo(num_exercises=7))
        result = service.list()
        assert result.count == len(result.records) == 7

    def test_storage_failure_propagates(self, service, repo):
        """A failed read is not reported as an empty list."""
        repo.fail_with("list")
        with pytest.raises(StorageError):
            service.list()


@pytest.mark.unit
class TestStats:
    """Tests for ExerciseQueryService.stats."""

    def test_stats_cover_all_records(self, service):
        """Stats are computed over the whole store."""
        stats = service.stats()
        assert stats.overall.total_exercises == 4
        assert stats.overall.total_duration == 155
        assert stats.overall.total_calories == 1150
        assert [s.category.value for s in stats.by_category] == ["cardio", "strength", "sports"]

    def test_stats_on_empty_store(self):
        """An empty store yields zero totals and no groups."""
        stats = ExerciseQueryService(exercise_repo=FakeExerciseRepository()).stats()
        assert stats.by_category == []
        assert stats.overall.total_exercises == 0
