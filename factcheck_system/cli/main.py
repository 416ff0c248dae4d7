"""Operator CLI for the fact-check system using Typer and Rich."""

import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from factcheck_system.agents.sifters.classification import ClaimClassifier
from factcheck_system.agents.sifters.credibility import SourceQualityScorer
from factcheck_system.config.logging import get_logger
from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import SearchProvider, SourceRecord

__version__ = "0.1.0"

# Initialize CLI app
app = typer.Typer(
    help="Fact-check System CLI - claim verification toolkit",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")


def _sources_from_urls(urls: Optional[List[str]], origin: SearchProvider) -> list[SourceRecord]:
    return [SourceRecord(title=url, url=url, origin=origin) for url in urls or []]


@app.command()
def status() -> None:
    """
    Display system configuration.

    Shows search provider, memory limits and logging settings.
    """
    logger.info("Displaying system status")

    table = Table(title="Fact-check System Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=15)
    table.add_column("Details", style="yellow")

    python_version = f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    table.add_row("Environment", "✓ Ready", python_version)

    if settings.brave_api_key:
        table.add_row("Search", "✓ Brave", "Brave Search with DuckDuckGo fallback")
    else:
        table.add_row("Search", "⚠ Fallback only", "BRAVE_API_KEY not set, DuckDuckGo only")

    memory_details = (
        f"User: {settings.user_memory_limit} turns, "
        f"Channel: {settings.channel_memory_limit} msgs "
        f"(window {settings.channel_context_window}, TTL {settings.channel_context_ttl_minutes} min)"
    )
    table.add_row("Memory", "✓ In-memory", memory_details)

    table.add_row(
        "Search decision",
        "✓ Active",
        f"History: {settings.decision_history_turns} turns, cutoff: {settings.knowledge_cutoff}",
    )

    log_details = f"Level: {settings.log_level}, Format: {settings.log_format}"
    table.add_row("Logging", "✓ Active", log_details)

    console.print(table)


@app.command()
def classify(
    text: str = typer.Argument(..., help="Analysis text to classify"),
    source: Optional[List[str]] = typer.Option(
        None, "--source", "-s", help="Source URL the analysis relied on (repeatable)"
    ),
    origin: SearchProvider = typer.Option(
        SearchProvider.DUCKDUCKGO, "--origin", help="Provider recorded for the sources"
    ),
) -> None:
    """
    Classify an analysis text: verdict, confidence, red flags and supporting points.

    Args:
        text: Free-text analysis (e.g. model output)
        source: Source URLs, one per --source
        origin: Provider recorded on each source
    """
    sources = _sources_from_urls(source, origin)
    analysis = ClaimClassifier().analyze(text, sources)
    logger.info("Classified analysis text", status=analysis.status.value, sources=len(sources))

    table = Table(title="Claim Classification", show_header=False)
    table.add_column("Field", style="cyan", width=20)
    table.add_column("Value", style="yellow")
    table.add_row("Status", analysis.status.value)
    table.add_row("Confidence", f"{analysis.confidence}%")
    table.add_row("Red flags", "\n".join(analysis.red_flags) or "-")
    table.add_row("Supporting points", "\n".join(analysis.supporting_points) or "-")

    console.print(table)


@app.command()
def score(
    source: List[str] = typer.Option(
        ..., "--source", "-s", help="Source URL to rate (repeatable)"
    ),
    origin: SearchProvider = typer.Option(
        SearchProvider.DUCKDUCKGO, "--origin", help="Provider recorded for the sources"
    ),
) -> None:
    """
    Rate the quality of a set of sources on a 0-100 scale.

    Args:
        source: Source URLs, one per --source
        origin: Provider recorded on each source
    """
    sources = _sources_from_urls(source, origin)
    report = SourceQualityScorer().analyze(sources)
    logger.info("Scored sources", score=report.score, sources=len(sources))

    console.print(Panel(
        "\n".join(report.details),
        title=f"Source quality: {report.score}/100",
        border_style="green" if report.score >= 50 else "yellow",
    ))


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]Fact-check System[/bold]")
    console.print(f"Version: {__version__}")


if __name__ == "__main__":
    app()
