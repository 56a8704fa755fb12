"""
Filter models for the job listings board.

Filters holds the user's current query; FilterResult explains why a single
job was shown or hidden.
"""

from dataclasses import dataclass, field
from typing import List

# Input names accepted by Filters.update, mapped to attribute names
_FIELD_NAMES = {
    "skills": "skills_query",
    "skills_query": "skills_query",
    "level": "level_query",
    "level_query": "level_query",
}


@dataclass
class Filters:
    """
    Current user-entered query.

    Created empty at session start and updated in place as the user types.
    Never persisted.

    Attributes:
        skills_query: Free-text substring matched against required skills ("" matches all)
        level_query: Canonical level key, or "" to match all levels
    """

    skills_query: str = ""
    level_query: str = ""

    def update(self, name: str, value: str) -> None:
        """
        Set a single filter field by its input name.

        Args:
            name: "skills" or "level" (attribute names are accepted too)
            value: New value for the field

        Raises:
            ValueError: If name is not a known filter field.
        """
        attr = _FIELD_NAMES.get(name)
        if attr is None:
            raise ValueError(f"Unknown filter field: {name}. Supported fields: skills, level")
        setattr(self, attr, value or "")

    def is_empty(self) -> bool:
        """True when neither query restricts the result."""
        return not self.skills_query and not self.level_query

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"skills": self.skills_query, "level": self.level_query}


@dataclass
class FilterRejection:
    """
    Detailed rejection reason from filter engine.

    Attributes:
        filter_category: Predicate that rejected ("skills" or "level")
        reason: Human-readable short reason
        detail: Specific detail about why rejected
    """

    filter_category: str
    reason: str
    detail: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "filter_category": self.filter_category,
            "reason": self.reason,
            "detail": self.detail,
        }


@dataclass
class FilterResult:
    """
    Result of running filter engine on a job.

    Attributes:
        passed: True if job passed all filters
        rejections: List of rejection reasons (empty if passed)
    """

    passed: bool
    rejections: List[FilterRejection] = field(default_factory=list)

    def add_rejection(self, filter_category: str, reason: str, detail: str) -> None:
        """
        Add a rejection reason.

        Args:
            filter_category: Predicate that failed
            reason: Human-readable reason
            detail: Specific detail
        """
        self.passed = False
        self.rejections.append(
            FilterRejection(filter_category=filter_category, reason=reason, detail=detail)
        )

    def get_rejection_summary(self) -> str:
        """
        Get comma-separated list of rejection reasons.

        Returns:
            Summary string like "Missing required skills, Level mismatch"
        """
        if not self.rejections:
            return "No rejections"
        return ", ".join([r.reason for r in self.rejections])

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "passed": self.passed,
            "rejections": [r.to_dict() for r in self.rejections],
            "rejection_summary": self.get_rejection_summary(),
        }
