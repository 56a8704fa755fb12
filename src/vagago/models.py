"""
Pydantic model for job postings.

Field names follow the snake_case JSON served by the jobs API and used in
fixture files. camelCase aliases are accepted as well.
"""

from typing import Any, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class JobRecord(BaseModel):
    """
    One job posting.

    Records are immutable once created. A fetch produces a fresh list that
    replaces the previous collection wholesale.
    """

    # Identity
    id: int = Field(description="Unique within the current collection")

    # Display fields
    title: str = ""
    company_name: str = Field(
        default="", validation_alias=AliasChoices("company_name", "companyName")
    )
    location: str = ""

    # Matched fields
    required_skills: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("required_skills", "requiredSkills"),
        description="Skill tokens in display order (duplicates allowed)",
    )
    level: str = Field(default="", description="Seniority label as supplied by the source")

    job_type: Tuple[str, ...] = Field(
        default=(), validation_alias=AliasChoices("job_type", "jobType")
    )

    # Optional descriptive fields (display only)
    expertise: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[str] = None
    published_date: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("published_date", "publishedDate")
    )
    url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("required_skills", "job_type", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        # Absent lists are empty, never null
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("title", "company_name", "location", "level", mode="before")
    @classmethod
    def _none_to_empty_string(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def skills_text(self) -> str:
        """Required skills joined by a single space, in original order."""
        return " ".join(self.required_skills)

    def to_dict(self) -> dict:
        """Convert to dictionary using the snake_case wire names."""
        return self.model_dump()
