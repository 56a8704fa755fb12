"""Command-line entry point for the job listings board."""

import argparse
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from vagago.board import JobBoard
from vagago.filters import FilterResult, Filters, JobFilterEngine, LevelSynonymTable
from vagago.logging_config import (
    format_display_value,
    get_display_limits,
    get_logger,
    setup_logging,
)
from vagago.models import JobRecord
from vagago.sources import create_source

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"

NO_RESULTS_MESSAGE = "No jobs match the selected filters."


def resolve_config_path(config_path: Optional[str] = None) -> Path:
    """Config file to use: the given path, then $VAGAGO_CONFIG, then the default."""
    return Path(config_path or os.getenv("VAGAGO_CONFIG") or DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to $VAGAGO_CONFIG, then
            config/config.yaml.

    Returns:
        Configuration dictionary (empty if the default file does not exist).

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist.
        ValueError: If the file does not hold a mapping at the top level.
    """
    explicit = config_path or os.getenv("VAGAGO_CONFIG")
    path = resolve_config_path(config_path)

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.info(f"No config file at {path}, using defaults")
        return {}

    with open(path, "r") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(
            f"Config file {path} must hold a mapping, got {type(config).__name__}"
        )
    return config


def build_board(config: Dict[str, Any], base_dir: Optional[Path] = None) -> JobBoard:
    """
    Create a board from configuration.

    Args:
        config: Application configuration.
        base_dir: Directory relative source paths are resolved against
            (normally the config file's directory).

    Returns:
        JobBoard with filters seeded from the "filters" section.

    Raises:
        ValueError: If a config section has the wrong shape or value.
    """
    level_table = LevelSynonymTable.from_config(config)
    filter_defaults = config.get("filters") or {}
    if not isinstance(filter_defaults, dict):
        raise ValueError(
            f"Config section 'filters' must be a mapping, got {type(filter_defaults).__name__}"
        )
    filters = Filters(
        skills_query=str(filter_defaults.get("skills") or ""),
        level_query=str(filter_defaults.get("level") or ""),
    )
    return JobBoard(
        source=create_source(config, base_dir=base_dir),
        filters=filters,
        engine=JobFilterEngine(level_table),
    )


def format_job_line(job: JobRecord) -> str:
    """One summary line for a job card."""
    console = get_display_limits()
    _, title = format_display_value(job.title, console["max_job_title_length"])
    _, company = format_display_value(job.company_name, console["max_company_name_length"])
    return (
        f"[{job.id}] {title} | Company: {company} | Location: {job.location} | "
        f"Skills: {', '.join(job.required_skills)} | Level: {job.level}"
    )


def format_job_details(job: JobRecord) -> List[str]:
    """All display fields of a job, values shown as supplied."""
    return [
        job.title,
        f"Company: {job.company_name}",
        f"Location: {job.location}",
        f"Skills: {', '.join(job.required_skills)}",
        f"Level: {job.level}",
        f"Job Type: {', '.join(job.job_type)}",
        f"Description: {job.description or ''}",
        f"Salary: {job.salary or ''}",
        f"Posted Date: {job.published_date or 'N/A'}",
        f"Link: {job.url or ''}",
    ]


def format_filter_result(job_id: int, result: FilterResult) -> List[str]:
    """Verdict line for a job plus one line per failed predicate."""
    if result.passed:
        return [f"Job {job_id}: visible"]
    lines = [f"Job {job_id}: hidden ({result.get_rejection_summary()})"]
    lines.extend(f"  {r.filter_category}: {r.detail}" for r in result.rejections)
    return lines


def render_summary(board: JobBoard) -> List[str]:
    """Lines for the listing view of the board."""
    visible = board.visible_jobs()
    lines = [f"Jobs: {len(visible)} of {len(board.jobs)}"]
    if not visible:
        lines.append(NO_RESULTS_MESSAGE)
        return lines
    lines.extend(format_job_line(job) for job in visible)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    load_dotenv()
    setup_logging()

    parser = argparse.ArgumentParser(description="VagaGO - Filter job listings by skills and level")
    parser.add_argument(
        "--config",
        help=f"Path to configuration file (default: $VAGAGO_CONFIG or {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--skills", help="Skills substring filter (overrides config)")
    parser.add_argument("--level", help="Level filter, e.g. Junior, Mid, Senior (overrides config)")
    parser.add_argument("--mock", action="store_true", help="Use the built-in mock jobs")
    parser.add_argument("--details", type=int, metavar="ID", help="Show all fields of one job")
    parser.add_argument(
        "--explain", type=int, metavar="ID", help="Show why one job is hidden by the filters"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        board = build_board(config, base_dir=resolve_config_path(args.config).parent)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error(f"Error loading configuration: {str(e)}")
        print(f"Error: {e}")
        return 1

    if args.skills is not None:
        board.filters.update("skills", args.skills)
    if args.level is not None:
        board.filters.update("level", args.level)

    refreshed = board.set_use_mock_data(True) if args.mock else board.refresh()
    if not refreshed:
        print("Error: could not load jobs (see log for details)")
        return 1

    if args.details is not None:
        job = board.find_job(args.details)
        if job is None:
            print(f"No job with id {args.details}")
            return 1
        print("\n".join(format_job_details(job)))
        return 0

    if args.explain is not None:
        result = board.explain_job(args.explain)
        if result is None:
            print(f"No job with id {args.explain}")
            return 1
        print("\n".join(format_filter_result(args.explain, result)))
        return 0

    print("\n".join(render_summary(board)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
