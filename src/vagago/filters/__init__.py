"""Job filtering system."""

from vagago.filters.filter_engine import JobFilterEngine, filter_jobs
from vagago.filters.levels import DEFAULT_LEVEL_TABLE, LevelSynonymTable
from vagago.filters.models import FilterRejection, FilterResult, Filters

__all__ = [
    "JobFilterEngine",
    "filter_jobs",
    "LevelSynonymTable",
    "DEFAULT_LEVEL_TABLE",
    "Filters",
    "FilterResult",
    "FilterRejection",
]
