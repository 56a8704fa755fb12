"""Session state for the job listings board."""

import logging
from typing import List, Optional

from vagago.filters import FilterResult, Filters, JobFilterEngine
from vagago.logging_config import get_structured_logger
from vagago.models import JobRecord
from vagago.sources import BaseJobSource, MockJobSource

logger = logging.getLogger(__name__)
slogger = get_structured_logger(__name__)


class JobBoard:
    """
    Holds the current job collection and filters for one user session.

    Every refresh replaces the collection wholesale. If a fetch fails the
    error is logged and the previous collection is kept. Not thread-safe;
    use one board per session.
    """

    def __init__(
        self,
        source: BaseJobSource,
        mock_source: Optional[BaseJobSource] = None,
        filters: Optional[Filters] = None,
        engine: Optional[JobFilterEngine] = None,
    ):
        """
        Initialize the board.

        Args:
            source: Configured job source
            mock_source: Source used while mock data is enabled (defaults to MockJobSource)
            filters: Initial filters (defaults to empty)
            engine: Filter engine (defaults to one using the default level table)
        """
        self.source = source
        self.mock_source = mock_source if mock_source is not None else MockJobSource()
        self.filters = filters if filters is not None else Filters()
        self.engine = engine if engine is not None else JobFilterEngine()
        self.jobs: List[JobRecord] = []
        self._use_mock_data = False

    @property
    def use_mock_data(self) -> bool:
        """True while the board reads from the mock source."""
        return self._use_mock_data

    @property
    def active_source(self) -> BaseJobSource:
        return self.mock_source if self._use_mock_data else self.source

    def refresh(self) -> bool:
        """
        Fetch the collection from the active source.

        Returns:
            True if the collection was replaced, False if the fetch failed
        """
        source = self.active_source
        try:
            jobs = source.fetch()
        except Exception as e:
            logger.error(f"Error fetching jobs from {source.name}: {str(e)}")
            return False

        self.jobs = list(jobs)
        slogger.source_activity(source.name, "REFRESHED", {"jobs": len(self.jobs)})
        return True

    def set_use_mock_data(self, enabled: bool) -> bool:
        """
        Switch between the mock and the configured source and refresh.

        Returns:
            Result of the refresh
        """
        self._use_mock_data = bool(enabled)
        return self.refresh()

    def toggle_mock_data(self) -> bool:
        """Flip the mock data switch and refresh."""
        return self.set_use_mock_data(not self._use_mock_data)

    def visible_jobs(self) -> List[JobRecord]:
        """Jobs matching the current filters, in collection order."""
        visible = self.engine.filter_jobs(self.jobs, self.filters)
        slogger.filter_activity(
            self.filters.to_dict(), total=len(self.jobs), visible=len(visible)
        )
        return visible

    def has_results(self) -> bool:
        """False when the current filters hide every job."""
        return bool(self.visible_jobs())

    def find_job(self, job_id: int) -> Optional[JobRecord]:
        """Return the job with this id from the current collection, or None."""
        return next((job for job in self.jobs if job.id == job_id), None)

    def explain_job(self, job_id: int) -> Optional[FilterResult]:
        """
        Evaluate one job against the current filters.

        Returns:
            FilterResult listing why the job is hidden, or None if no job
            with this id is loaded
        """
        job = self.find_job(job_id)
        if job is None:
            return None
        return self.engine.evaluate_job(job, self.filters)
