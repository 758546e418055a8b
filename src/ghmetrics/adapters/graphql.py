"""Adapter for timelines exported from the GitHub GraphQL contributions query.

Each year follows the shape produced by the dashboard's data layer::

    {
        "year": 2024,
        "totalCommits": 120,
        "totalIssues": 4,
        "totalPRs": 9,
        "totalReviews": 2,
        "ownedRepos": [{"contributions": {"totalCount": 30}, "repository": {...}}],
        "contributions": [...]
    }
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ghmetrics.models.schemas import Repository, RepositoryContribution, Timeline, YearData

logger = logging.getLogger(__name__)


class TimelineLoadError(Exception):
    """Raised when a timeline document cannot be read or mapped."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load timeline from {source}: {reason}")


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_repository(data: dict[str, Any]) -> Repository:
    """Map a GraphQL repository node to a Repository."""
    owner = data.get("owner") or {}
    language = data.get("primaryLanguage") or {}

    return Repository(
        url=data["url"],
        name=data.get("name") or data["url"].rstrip("/").rsplit("/", 1)[-1],
        owner=owner.get("login", "") if isinstance(owner, dict) else str(owner),
        stargazer_count=data.get("stargazerCount", 0),
        fork_count=data.get("forkCount", 0),
        is_fork=data.get("isFork", False),
        is_archived=data.get("isArchived", False),
        is_private=data.get("isPrivate", False),
        primary_language=language.get("name") if isinstance(language, dict) else language,
        description=data.get("description"),
        created_at=_parse_datetime(data.get("createdAt")),
    )


def parse_repository_contribution(data: dict[str, Any]) -> RepositoryContribution:
    """Map a ``commitContributionsByRepository`` entry."""
    contributions = data.get("contributions") or {}
    return RepositoryContribution(
        commit_count=contributions.get("totalCount", 0),
        repository=parse_repository(data["repository"]),
    )


def parse_year(data: dict[str, Any]) -> YearData:
    """Map one year of contribution data."""
    return YearData(
        year=data["year"],
        total_commits=data.get("totalCommits", 0),
        total_issues=data.get("totalIssues", 0),
        total_prs=data.get("totalPRs", 0),
        total_reviews=data.get("totalReviews", 0),
        owned_repos=[parse_repository_contribution(r) for r in data.get("ownedRepos", [])],
        contributions=[parse_repository_contribution(r) for r in data.get("contributions", [])],
    )


def parse_timeline(data: list | dict, source: str = "<data>") -> Timeline:
    """Map a timeline document to YearData entries.

    Args:
        data: A list of years, or an object holding them under ``timeline``.
        source: Name used in error messages.

    Raises:
        TimelineLoadError: If the document does not have the expected shape.
    """
    if isinstance(data, dict):
        if "timeline" not in data:
            raise TimelineLoadError(source, "object has no 'timeline' key")
        data = data["timeline"]

    if not isinstance(data, list):
        raise TimelineLoadError(source, f"expected a list of years, got {type(data).__name__}")

    timeline = []
    for index, entry in enumerate(data):
        try:
            timeline.append(parse_year(entry))
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            # ValidationError is a ValueError subclass
            detail = str(e) if isinstance(e, ValidationError) else f"missing or invalid field {e}"
            raise TimelineLoadError(source, f"year entry {index}: {detail}") from e

    logger.debug(f"Parsed {len(timeline)} years from {source}")
    return timeline


def load_timeline(path: Path) -> Timeline:
    """Read and map a timeline JSON file.

    Raises:
        TimelineLoadError: If the file is missing, not JSON, or malformed.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise TimelineLoadError(str(path), e.strerror or str(e)) from e

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TimelineLoadError(str(path), f"invalid JSON: {e}") from e

    timeline = parse_timeline(data, source=str(path))
    logger.info(f"Loaded {len(timeline)} years from {path}")
    return timeline
