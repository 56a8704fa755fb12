"""Job record sources."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from vagago.sources.base import BaseJobSource
from vagago.sources.file_source import JsonFileJobSource
from vagago.sources.mock import MOCK_JOBS, MockJobSource


def create_source(
    config: Dict[str, Any], base_dir: Optional[Union[str, Path]] = None
) -> BaseJobSource:
    """
    Factory function to create the configured job source.

    Args:
        config: Application configuration. Reads the "source" section:
            type ('mock' or 'file') and path (for 'file').
        base_dir: Directory a relative source.path is resolved against,
            normally the directory holding the config file. If None,
            relative paths are left relative to the working directory.

    Returns:
        BaseJobSource instance.

    Raises:
        ValueError: If the source section is not a mapping, the source type
            is not supported, or a file source has no path.
    """
    source_config = config.get("source") or {}
    if not isinstance(source_config, dict):
        raise ValueError(
            f"Config section 'source' must be a mapping, got {type(source_config).__name__}"
        )
    source_type = str(source_config.get("type", "mock")).lower()

    if source_type == "mock":
        return MockJobSource()

    elif source_type == "file":
        path = source_config.get("path")
        if not path:
            raise ValueError("File source requires source.path in configuration")
        path = Path(path)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path
        return JsonFileJobSource(path)

    else:
        raise ValueError(f"Unsupported job source: {source_type}. Supported sources: mock, file")


__all__ = [
    "BaseJobSource",
    "JsonFileJobSource",
    "MockJobSource",
    "MOCK_JOBS",
    "create_source",
]
