"""Helpers shared by the metric calculators."""

import math
from collections.abc import Iterable, Sequence
from typing import TypeVar

from ghmetrics.models.schemas import RepositoryContribution, YearData

T = TypeVar("T", bound=RepositoryContribution)
L = TypeVar("L")

# Ordered (threshold, points) pairs, highest threshold first.
TierTable = Sequence[tuple[float, float]]


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Clamp a value into [min_value, max_value]."""
    return min(max(value, min_value), max_value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    ``round()`` uses banker's rounding, which would turn a 12.5 point
    documentation score into 12 instead of 13.
    """
    return math.floor(value + 0.5)


def tiered_points(value: float, tiers: TierTable, default: float = 0) -> float:
    """Return the points of the first tier whose threshold ``value`` reaches."""
    for threshold, points in tiers:
        if value >= threshold:
            return points
    return default


def classify(score: float, thresholds: Sequence[tuple[float, L]], default: L) -> L:
    """Return the label of the first threshold ``score`` reaches."""
    for threshold, label in thresholds:
        if score >= threshold:
            return label
    return default


def calculate_total_stars(year: YearData) -> int:
    """Total stargazers across one year's owned and contributed repos."""
    return sum(r.repository.stargazer_count for r in year.all_repos)


def calculate_total_forks(year: YearData) -> int:
    """Total forks across one year's owned and contributed repos."""
    return sum(r.repository.fork_count for r in year.all_repos)


def extract_languages(year: YearData) -> set[str]:
    """Primary languages of one year's repositories."""
    return {
        r.repository.primary_language
        for r in year.all_repos
        if r.repository.primary_language
    }


def get_last_n_months(timeline: Sequence[YearData], months: int) -> list[YearData]:
    """Approximate the last ``months`` months with whole years.

    The data is yearly, so up to 3 months means the latest year, up to 12
    months the latest two years, and anything longer ``ceil(months / 12)``
    years. Returns a new list sorted newest first; ``timeline`` is left
    untouched.
    """
    if not timeline:
        return []

    if months <= 3:
        years_to_include = 1
    elif months <= 12:
        years_to_include = 2
    else:
        years_to_include = math.ceil(months / 12)

    return sorted(timeline, key=lambda y: y.year, reverse=True)[:years_to_include]


def count_unique_repos(years: Iterable[YearData]) -> int:
    """Count distinct repository URLs across the given years."""
    urls = set()
    for year in years:
        urls.update(r.repository.url for r in year.all_repos)
    return len(urls)


def get_unique_repos(repos: Iterable[T]) -> list[T]:
    """Drop repeated repositories by URL, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[T] = []

    for repo in repos:
        if repo.repository.url not in seen:
            seen.add(repo.repository.url)
            unique.append(repo)

    return unique
