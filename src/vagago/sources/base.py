"""Base class for job record sources."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from vagago.models import JobRecord

logger = logging.getLogger(__name__)


class BaseJobSource(ABC):
    """Abstract base class for job sources.

    A source supplies the full job collection on every fetch. Standard raw
    record structure:
    {
        "id": int,                   # Unique id within the collection
        "title": str,                # Job title
        "company_name": str,         # Company name
        "location": str,             # Job location
        "required_skills": [str],    # Skill tokens (may be missing or null)
        "level": str,                # Seniority label in any spelling
        "job_type": [str],           # Employment types (may be missing or null)
        "expertise": str,            # Display-only seniority (optional)
        "description": str,          # Full description (optional)
        "salary": str,               # Salary range (optional)
        "published_date": str,       # ISO timestamp (optional)
        "url": str,                  # Job posting URL (optional)
    }
    """

    name = "base"

    @abstractmethod
    def fetch(self) -> List[JobRecord]:
        """
        Fetch the current job collection.

        Returns:
            List of validated job records, in source order.

        Raises:
            RuntimeError: If the collection cannot be retrieved.
        """
        pass

    def parse_job(self, raw: Dict[str, Any]) -> JobRecord:
        """
        Validate a single raw record.

        Args:
            raw: Raw record dictionary.

        Returns:
            JobRecord instance.

        Raises:
            pydantic.ValidationError: If the record is malformed.
        """
        return JobRecord.model_validate(raw)

    def parse_jobs(self, raw_jobs: Iterable[Dict[str, Any]]) -> List[JobRecord]:
        """Validate raw records, skipping (and logging) the malformed ones."""
        jobs = []
        for index, raw in enumerate(raw_jobs):
            try:
                jobs.append(self.parse_job(raw))
            except (ValidationError, TypeError) as e:
                logger.warning(f"Skipping invalid job record #{index} from {self.name}: {e}")
        return jobs
