"""Tests for the job board session state."""

from unittest.mock import Mock

import pytest

from vagago.board import JobBoard
from vagago.filters import Filters, JobFilterEngine, LevelSynonymTable
from vagago.models import JobRecord
from vagago.sources import MockJobSource


def make_job(job_id, level="", skills=None):
    """Build a minimal job record."""
    return JobRecord(id=job_id, title=f"Job {job_id}", level=level, required_skills=skills or [])


@pytest.fixture
def live_jobs():
    """Jobs returned by the configured source."""
    return [
        make_job(101, level="Pleno", skills=["React", "TypeScript"]),
        make_job(102, level="Sênior", skills=["Python", "Spark"]),
        make_job(103, level="jr", skills=["CSS"]),
    ]


@pytest.fixture
def live_source(live_jobs):
    """Create a mock configured source."""
    source = Mock()
    source.name = "file"
    source.fetch.return_value = live_jobs
    return source


@pytest.fixture
def board(live_source):
    """Create a board backed by the mock configured source."""
    return JobBoard(source=live_source)


class TestBoardInit:
    """Test JobBoard initialization."""

    def test_defaults(self, board, live_source):
        """Test default state before the first refresh."""
        assert board.jobs == []
        assert board.filters == Filters()
        assert board.use_mock_data is False
        assert board.active_source is live_source
        assert isinstance(board.mock_source, MockJobSource)
        assert isinstance(board.engine, JobFilterEngine)

    def test_custom_collaborators(self, live_source):
        """Test supplying filters, engine and mock source."""
        filters = Filters(skills_query="css")
        engine = JobFilterEngine(LevelSynonymTable())
        mock_source = MockJobSource([])

        board = JobBoard(live_source, mock_source=mock_source, filters=filters, engine=engine)

        assert board.filters is filters
        assert board.engine is engine
        assert board.mock_source is mock_source


class TestRefresh:
    """Test JobBoard.refresh."""

    def test_refresh_loads_jobs(self, board, live_jobs, live_source):
        """Test that refresh fetches from the configured source."""
        assert board.refresh() is True
        assert board.jobs == live_jobs
        live_source.fetch.assert_called_once()

    def test_refresh_replaces_collection(self, board, live_source):
        """Test that each refresh replaces the collection wholesale."""
        live_source.fetch.side_effect = [
            [make_job(1), make_job(2)],
            [make_job(3)],
        ]

        board.refresh()
        assert [job.id for job in board.jobs] == [1, 2]

        board.refresh()
        assert [job.id for job in board.jobs] == [3]

    def test_refresh_failure_keeps_previous_jobs(self, board, live_source, live_jobs, caplog):
        """Test that a failed fetch is logged and leaves state unchanged."""
        board.refresh()
        live_source.fetch.side_effect = RuntimeError("connection refused")

        assert board.refresh() is False
        assert board.jobs == live_jobs
        assert "error fetching jobs from file" in caplog.text.lower()
        assert "connection refused" in caplog.text


class TestMockToggle:
    """Test switching between mock and configured data."""

    def test_toggle_to_mock(self, board):
        """Test that enabling mock data loads the mock jobs."""
        assert board.toggle_mock_data() is True

        assert board.use_mock_data is True
        assert [job.id for job in board.jobs] == [1, 2, 3]

    def test_toggle_back(self, board, live_jobs):
        """Test that disabling mock data reloads the configured source."""
        board.toggle_mock_data()
        board.toggle_mock_data()

        assert board.use_mock_data is False
        assert board.jobs == live_jobs

    def test_set_use_mock_data(self, board, live_source):
        """Test setting the switch explicitly."""
        board.set_use_mock_data(True)
        assert board.active_source is board.mock_source
        live_source.fetch.assert_not_called()

    def test_filters_survive_toggle(self, board):
        """Test that switching sources keeps the current filters."""
        board.filters.update("level", "Senior")
        board.toggle_mock_data()

        assert board.filters.level_query == "Senior"
        assert [job.title for job in board.visible_jobs()] == ["Backend Developer"]


class TestVisibleJobs:
    """Test filtered views of the board."""

    def test_all_visible_without_filters(self, board, live_jobs):
        """Test that empty filters show every job."""
        board.refresh()
        assert board.visible_jobs() == live_jobs
        assert board.has_results()

    def test_filters_updated_in_place(self, board):
        """Test that in-place filter changes apply to the next view."""
        board.refresh()

        board.filters.update("skills", "py")
        assert [job.id for job in board.visible_jobs()] == [102]

        board.filters.update("skills", "")
        board.filters.update("level", "Junior")
        assert [job.id for job in board.visible_jobs()] == [103]

    def test_no_results(self, board):
        """Test the empty view."""
        board.refresh()
        board.filters.update("level", "Principal")

        assert board.visible_jobs() == []
        assert board.has_results() is False

    def test_empty_board_has_no_results(self, board):
        """Test a board that has not loaded anything."""
        assert board.has_results() is False


class TestFindJob:
    """Test selecting a job by id."""

    def test_find_existing(self, board):
        """Test looking up a job in the collection."""
        board.refresh()
        assert board.find_job(102).level == "Sênior"

    def test_find_hidden_job(self, board):
        """Test that lookup ignores the current filters."""
        board.refresh()
        board.filters.update("level", "Junior")
        assert board.find_job(102) is not None

    def test_find_missing(self, board):
        """Test looking up an unknown id."""
        board.refresh()
        assert board.find_job(999) is None


class TestExplainJob:
    """Test JobBoard.explain_job."""

    def test_explain_hidden_job(self, board):
        """Test that the rejection reasons follow the current filters."""
        board.refresh()
        board.filters.update("level", "Junior")

        result = board.explain_job(102)

        assert result.passed is False
        assert [r.filter_category for r in result.rejections] == ["level"]

    def test_explain_visible_job(self, board):
        """Test that a job on screen passes."""
        board.refresh()
        board.filters.update("level", "Junior")

        result = board.explain_job(103)

        assert result.passed is True
        assert result.get_rejection_summary() == "No rejections"

    def test_explain_missing(self, board):
        """Test explaining an id that is not loaded."""
        board.refresh()
        assert board.explain_job(999) is None
