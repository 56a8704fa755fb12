"""Static fixture job source."""

import logging
from typing import Any, Dict, List, Optional

from vagago.models import JobRecord
from vagago.sources.base import BaseJobSource

logger = logging.getLogger(__name__)


MOCK_JOBS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "title": "Frontend Developer",
        "company_name": "TechCorp",
        "location": "Remote",
        "required_skills": ["React", "JavaScript", "CSS"],
        "expertise": "Mid",
        "description": "Develop user interfaces for modern web applications.",
        "salary": "$70,000 - $90,000",
        "published_date": "2023-01-15T00:00:00Z",
        "job_type": ["Full-time"],
        "level": "Intermediate",
        "url": "https://example.com/job/1",
    },
    {
        "id": 2,
        "title": "Backend Developer",
        "company_name": "CodeBase",
        "location": "New York",
        "required_skills": ["Node.js", "MongoDB", "Express"],
        "expertise": "Senior",
        "description": "Implement and maintain backend systems.",
        "salary": "$90,000 - $120,000",
        "published_date": "2023-01-20T00:00:00Z",
        "job_type": ["Contract"],
        "level": "Expert",
        "url": "https://example.com/job/2",
    },
    {
        "id": 3,
        "title": "UI/UX Designer",
        "company_name": "DesignHub",
        "location": "San Francisco",
        "required_skills": ["Figma", "Adobe XD", "Sketch"],
        "expertise": "Junior",
        "description": "Create intuitive designs for applications.",
        "salary": "$60,000 - $80,000",
        "published_date": "2023-01-25T00:00:00Z",
        "job_type": ["Part-time"],
        "level": "Beginner",
        "url": "https://example.com/job/3",
    },
]


class MockJobSource(BaseJobSource):
    """Serves the built-in sample jobs (or a supplied list of raw records)."""

    name = "mock"

    def __init__(self, raw_jobs: Optional[List[Dict[str, Any]]] = None):
        self.raw_jobs = MOCK_JOBS if raw_jobs is None else raw_jobs

    def fetch(self) -> List[JobRecord]:
        jobs = self.parse_jobs(self.raw_jobs)
        logger.info(f"Loaded {len(jobs)} mock jobs")
        return jobs
