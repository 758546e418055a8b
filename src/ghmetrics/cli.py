"""CLI entry point for ghmetrics."""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ghmetrics.adapters.graphql import TimelineLoadError, load_timeline
from ghmetrics.analyzers.badges import analyze_all_years, get_career_summary, get_year_metrics
from ghmetrics.analyzers.categories import CATEGORY_CONFIGS, METRIC_CONFIGS
from ghmetrics.analyzers.history import calculate_metric_history
from ghmetrics.analyzers.scorer import Scorer
from ghmetrics.models.schemas import MetricData, Timeline

app = typer.Typer(help="GitHub profile metrics from yearly contribution data.")

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    level = "DEBUG" if verbose else os.environ.get("GHMETRICS_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        console.print(f"[red]Invalid GHMETRICS_LOG_LEVEL: {level}[/red]")
        raise typer.Exit(1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def parse_now(value: str | None) -> datetime:
    """Resolve the evaluation time from an option or ``GHMETRICS_NOW``.

    Raises:
        ValueError: If the timestamp is not ISO-8601.
    """
    value = value or os.environ.get("GHMETRICS_NOW")
    if not value:
        return datetime.now(timezone.utc)

    now = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now


def _load(path: Path) -> Timeline:
    try:
        return load_timeline(path)
    except TimelineLoadError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _resolve_now(value: str | None) -> datetime:
    try:
        return parse_now(value)
    except ValueError as e:
        console.print(f"[red]Invalid --now value: {e}[/red]")
        raise typer.Exit(1)


def _score_color(score: float) -> str:
    return "green" if score >= 61 else "yellow" if score >= 41 else "red"


def _bar(score: float, width: int = 20) -> str:
    filled = int(max(0, min(100, score)) / 100 * width)
    return "█" * filled + "░" * (width - filled)


@app.command()
def score(
    timeline_file: Path = typer.Argument(..., help="Timeline JSON file"),
    now: str | None = typer.Option(None, "--now", help="Evaluation time (ISO-8601)"),
    authenticity: float | None = typer.Option(
        None, "--authenticity", "-a", min=0, max=100, help="Externally computed authenticity score"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON file"),
) -> None:
    """Score a timeline and show metric and category results."""
    timeline = _load(timeline_file)
    evaluated_at = _resolve_now(now)

    authenticity_metric = None
    if authenticity is not None:
        authenticity_metric = MetricData(score=authenticity, level="External")

    scores = Scorer(now=evaluated_at).calculate_scores(timeline, authenticity=authenticity_metric)

    console.print()
    console.print(f"[bold cyan]{timeline_file.name}[/bold cyan]  [dim]{len(timeline)} years[/dim]")
    console.print()

    # Category overview
    for category in scores.categories:
        config = CATEGORY_CONFIGS[category.category]
        color = _score_color(category.score)
        first, second = category.metrics.first, category.metrics.second
        console.print(
            Panel(
                f"[bold][{color}]{category.score}[/{color}][/bold] / 100\n"
                f"[dim]{METRIC_CONFIGS[first.key].title} {first.score:g} · "
                f"{METRIC_CONFIGS[second.key].title} {second.score:g}[/dim]",
                title=config.title,
                subtitle=config.description,
                expand=False,
            )
        )

    # Metric breakdown
    table = Table(title="Metrics", show_header=True)
    table.add_column("Metric", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Level")
    table.add_column("Breakdown", style="dim")
    table.add_column("Bar", width=20)

    results = [
        ("Activity", scores.activity),
        ("Impact", scores.impact),
        ("Quality", scores.quality),
        ("Growth", scores.growth),
        ("Consistency", scores.consistency),
        ("Collaboration", scores.collaboration),
    ]
    for name, result in results:
        breakdown = ", ".join(f"{k}={v}" for k, v in result.breakdown.model_dump().items())
        color = _score_color(result.score)
        table.add_row(
            name,
            f"[{color}]{result.score}[/{color}]",
            result.level.value,
            breakdown,
            _bar(result.score),
        )

    console.print(table)

    if output:
        output.write_text(json.dumps(scores.model_dump(mode="json"), indent=2))
        console.print(f"\n[green]Saved to {output}[/green]")


@app.command()
def history(
    timeline_file: Path = typer.Argument(..., help="Timeline JSON file"),
    now: str | None = typer.Option(None, "--now", help="Evaluation time (ISO-8601)"),
) -> None:
    """Show metrics for each year scored on its own."""
    timeline = _load(timeline_file)
    rows = calculate_metric_history(timeline, _resolve_now(now))

    table = Table(title="Metric Development")
    table.add_column("Year", style="bold")
    table.add_column("Activity", justify="right")
    table.add_column("Impact", justify="right")
    table.add_column("Quality", justify="right")
    table.add_column("Growth", justify="right")

    for row in rows:
        table.add_row(
            str(row.year),
            str(row.activity),
            str(row.impact),
            str(row.quality),
            str(row.growth),
        )

    console.print(table)


@app.command()
def years(
    timeline_file: Path = typer.Argument(..., help="Timeline JSON file"),
) -> None:
    """Show year badges and a career summary."""
    timeline = _load(timeline_file)
    if not timeline:
        console.print("[yellow]Timeline has no years[/yellow]")
        raise typer.Exit(0)

    analyses = analyze_all_years(timeline)

    table = Table(title="Years")
    table.add_column("Year", style="bold")
    table.add_column("Badge")
    table.add_column("Commits", justify="right")
    table.add_column("PRs", justify="right")
    table.add_column("Repos", justify="right")
    table.add_column("YoY", justify="right")
    table.add_column("Insight", style="dim")

    for year in sorted(timeline, key=lambda y: y.year, reverse=True):
        analysis = analyses[year.year]
        metrics = get_year_metrics(year)
        yoy = f"{analysis.yoy_change:+.0f}%" if analysis.yoy_change is not None else "-"
        table.add_row(
            str(year.year),
            f"{analysis.badge.emoji} {analysis.badge.label}",
            f"{metrics.commits:,}",
            str(metrics.prs),
            str(metrics.repos),
            yoy,
            analysis.insight.text if analysis.insight else "",
        )

    console.print(table)

    summary = get_career_summary(timeline)
    info_table = Table(show_header=False, box=None)
    info_table.add_column("Key", style="bold")
    info_table.add_column("Value")
    info_table.add_row("Total Commits", f"{summary.total_commits:,}")
    info_table.add_row("Total PRs", f"{summary.total_prs:,}")
    info_table.add_row("Active Years", f"{summary.years_active} of {summary.total_years}")
    info_table.add_row("Since", str(summary.start_year))
    info_table.add_row("Unique Repos", str(summary.unique_repos))

    console.print()
    console.print(info_table)


@app.command()
def version() -> None:
    """Show version information."""
    from ghmetrics import __version__

    console.print(f"ghmetrics v{__version__}")


if __name__ == "__main__":
    app()
