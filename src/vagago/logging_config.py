"""Logging configuration for the job listings board."""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

# Global configuration cache
_logging_config: Optional[Dict] = None


def _load_logging_config() -> Dict:
    """
    Load logging configuration from config/logging.yaml.

    Returns:
        Dict with logging configuration, or default config if file not found.
    """
    global _logging_config

    if _logging_config is not None:
        return _logging_config

    config_path = Path(__file__).parent.parent.parent / "config" / "logging.yaml"

    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                _logging_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            print(f"⚠️  Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            _logging_config = {}
    else:
        _logging_config = {}

    # Apply defaults if keys are missing
    if "console" not in _logging_config:
        _logging_config["console"] = {}

    _logging_config["console"].setdefault("max_job_title_length", 60)
    _logging_config["console"].setdefault("max_company_name_length", 80)
    _logging_config["console"].setdefault("max_query_length", 40)

    return _logging_config


def get_display_limits() -> Dict[str, int]:
    """Console truncation limits (max_job_title_length, max_company_name_length, ...)."""
    return _load_logging_config()["console"]


def format_display_value(value: str, max_length: Optional[int] = None) -> Tuple[str, str]:
    """
    Format a value for logging with both full and display versions.

    Args:
        value: The full value to format.
        max_length: Maximum length for display version. If None, uses the
            configured max_query_length.

    Returns:
        Tuple of (full_value, display_value) where display_value is
        truncated with an ellipsis if needed.

    Example:
        >>> format_display_value("python django postgres", max_length=10)
        ('python django postgres', 'python ...')
    """
    if not value:
        return "", ""

    full_value = value.strip()

    if max_length is None:
        config = _load_logging_config()
        max_length = config["console"]["max_query_length"]

    # If max_length is 0 or negative, no truncation
    if max_length <= 0 or len(full_value) <= max_length:
        return full_value, full_value

    # Reserve 3 characters for "..."
    if max_length <= 3:
        display_value = full_value[:max_length]
    else:
        display_value = full_value[: max_length - 3] + "..."

    return full_value, display_value


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure console and file logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path to log file. If None, uses logs/vagago.log.

    Environment Variables:
        LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FILE: Override log file path.
        ENVIRONMENT: Environment name (staging, production, development).
    """
    log_level = os.getenv("LOG_LEVEL", log_level).upper()
    log_file = os.getenv("LOG_FILE", log_file or "logs/vagago.log")
    environment = os.getenv("ENVIRONMENT", "development")

    # Create logs directory if it doesn't exist
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers = [
        logging.StreamHandler(sys.stderr),
        logging.FileHandler(log_file),
    ]

    log_format = f"[{environment.upper()}] %(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=log_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging configured: environment={environment}, level={log_level}, file={log_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


class StructuredLogger:
    """
    Helper class for structured logging with consistent formatting.

    Provides methods for logging common board operations with context.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize structured logger.

        Args:
            logger: Base logger instance
        """
        self.logger = logger

    def source_activity(self, source: str, action: str, details: Optional[Dict] = None) -> None:
        """
        Log job source activity.

        Args:
            source: Source name (mock, file, ...)
            action: Action being performed
            details: Optional additional details
        """
        message = f"[SOURCE] {action} - Source:{source}"
        if details:
            detail_str = ", ".join(f"{k}={v}" for k, v in details.items())
            message += f" | {detail_str}"
        self.logger.info(message)

    def filter_activity(self, filters: Dict[str, str], total: int, visible: int) -> None:
        """
        Log a filter run at debug level.

        Runs happen on every filter change, so query values are truncated
        for readability.

        Args:
            filters: Filter values by input name
            total: Size of the collection
            visible: Number of jobs that passed
        """
        shown = ", ".join(f"{k}={format_display_value(v)[1]!r}" for k, v in filters.items())
        self.logger.debug(f"[FILTER] {visible}/{total} visible | {shown}")


def get_structured_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.
    """
    return StructuredLogger(logging.getLogger(name))
