"""Job source backed by a JSON fixture file."""

import json
import logging
from pathlib import Path
from typing import List, Union

from vagago.models import JobRecord
from vagago.sources.base import BaseJobSource

logger = logging.getLogger(__name__)


class JsonFileJobSource(BaseJobSource):
    """
    Reads the job collection from a JSON file.

    The file holds either a list of records or an object with a "jobs" list.
    The file is re-read on every fetch.
    """

    name = "file"

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the source.

        Args:
            path: Path to the JSON file
        """
        self.path = Path(path)

    def fetch(self) -> List[JobRecord]:
        """
        Read and validate the jobs in the file.

        Returns:
            List of job records (invalid records are skipped).

        Raises:
            RuntimeError: If the file is missing, unreadable, not UTF-8 or not valid JSON,
                or does not contain a list of jobs.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Failed to read jobs from {self.path}: {str(e)}") from e

        if isinstance(data, dict):
            data = data.get("jobs", [])

        if not isinstance(data, list):
            raise RuntimeError(
                f"Expected a list of jobs in {self.path}, got {type(data).__name__}"
            )

        jobs = self.parse_jobs(data)
        logger.info(f"Loaded {len(jobs)} jobs from {self.path}")
        return jobs
