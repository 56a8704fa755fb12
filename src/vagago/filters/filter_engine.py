"""
Job filter engine for the listings board.

Selects the jobs visible under the user's current filters: a free-text
skills substring and a canonical seniority level resolved through the
level synonym table.
"""

import logging
from typing import List, Optional, Sequence

from vagago.filters.levels import DEFAULT_LEVEL_TABLE, LevelSynonymTable
from vagago.filters.models import FilterResult, Filters
from vagago.models import JobRecord

logger = logging.getLogger(__name__)


class JobFilterEngine:
    """
    Filter engine that evaluates jobs against the current Filters.

    Applies two predicates, both of which must hold:
    1. Skills: the space-joined skill list contains the skills query
    2. Level: the job's level label contains a synonym of the level query

    Matching is case-insensitive substring containment. For levels the
    synonym is searched inside job.level, never the reverse. An unknown
    level query matches no job.

    The engine holds no mutable state and never modifies the jobs it is
    given, so one instance can be shared freely.
    """

    def __init__(self, level_table: Optional[LevelSynonymTable] = None):
        """
        Initialize filter engine.

        Args:
            level_table: Synonym table used to resolve level queries
                (defaults to DEFAULT_LEVEL_TABLE)
        """
        self.level_table = level_table if level_table is not None else DEFAULT_LEVEL_TABLE

    def filter_jobs(self, jobs: Sequence[JobRecord], filters: Filters) -> List[JobRecord]:
        """
        Return the jobs that pass both predicates, in input order.

        Args:
            jobs: Current job collection
            filters: Current user query

        Returns:
            New list with the visible jobs
        """
        self._warn_unknown_level(filters.level_query)

        visible = [
            job
            for job in jobs
            if self.matches_skills(job, filters.skills_query)
            and self.matches_level(job, filters.level_query)
        ]

        logger.debug(
            f"Filtered {len(jobs)} jobs to {len(visible)} "
            f"(skills='{filters.skills_query}', level='{filters.level_query}')"
        )
        return visible

    def matches_skills(self, job: JobRecord, skills_query: str) -> bool:
        """Check if the job's joined skills contain the query (empty query matches)."""
        if not skills_query:
            return True
        return skills_query.lower() in job.skills_text.lower()

    def matches_level(self, job: JobRecord, level_query: str) -> bool:
        """
        Check if the job's level label contains a synonym of the level query.

        An empty query matches every job. A query that is not a key of the
        synonym table has no synonyms and therefore matches nothing.
        """
        if not level_query:
            return True

        job_level = job.level.lower()
        return any(
            synonym in job_level for synonym in self.level_table.lowered_synonyms_for(level_query)
        )

    def evaluate_job(self, job: JobRecord, filters: Filters) -> FilterResult:
        """
        Evaluate a single job and record why it was rejected.

        Args:
            job: Job to evaluate
            filters: Current user query

        Returns:
            FilterResult with pass/fail and rejection reasons
        """
        result = FilterResult(passed=True)

        if not self.matches_skills(job, filters.skills_query):
            result.add_rejection(
                filter_category="skills",
                reason="Missing required skills",
                detail=f"Skills '{job.skills_text}' do not contain '{filters.skills_query}'",
            )

        if not self.matches_level(job, filters.level_query):
            if filters.level_query in self.level_table:
                detail = (
                    f"Level '{job.level}' matches none of: "
                    f"{', '.join(self.level_table.synonyms_for(filters.level_query))}"
                )
            else:
                detail = f"Unknown level '{filters.level_query}'"
            result.add_rejection(
                filter_category="level",
                reason="Level mismatch",
                detail=detail,
            )

        if result.passed:
            logger.debug(f"Job passed all filters: {job.title} at {job.company_name}")
        else:
            logger.debug(
                f"Job filtered: {job.title} at {job.company_name} - {result.get_rejection_summary()}"
            )

        return result

    def _warn_unknown_level(self, level_query: str) -> None:
        if level_query and level_query not in self.level_table:
            logger.warning(
                f"Unknown level filter '{level_query}', no jobs will match. "
                f"Supported levels: {', '.join(self.level_table.levels)}"
            )


_default_engine = JobFilterEngine()


def filter_jobs(
    jobs: Sequence[JobRecord],
    filters: Filters,
    level_table: Optional[LevelSynonymTable] = None,
) -> List[JobRecord]:
    """
    Filter jobs with the default engine, or one built on level_table.

    Args:
        jobs: Current job collection
        filters: Current user query
        level_table: Optional synonym table overriding the default

    Returns:
        Visible jobs in input order
    """
    engine = _default_engine if level_table is None else JobFilterEngine(level_table)
    return engine.filter_jobs(jobs, filters)
