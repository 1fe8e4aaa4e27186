"""Console rendering for analysis reports and rate-limit advice."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modcheck.moderation.models import AnalysisReport
from modcheck.ratelimit.models import RateLimitInfo
from modcheck.utils.content import preview


def format_score(score: float) -> str:
    return f"{score * 100:.2f}%"


def render_analysis(
    console: Console,
    report: AnalysisReport,
    text: str = "",
    source: str | None = None,
) -> None:
    """Print *report* for the moderated *text*, or for a saved result read from *source*."""
    if source is not None:
        console.print(f"\n[bold]Analysis of saved result:[/] {escape(source)}")
    else:
        console.print(f'\n[bold]Analysis for:[/] "{escape(preview(text, 30))}"')
    if not report.flagged:
        console.print("Flagged: [green]NO[/]\n")
        return

    console.print("Flagged: [bold red]YES[/]")
    names = ", ".join(c.value for c in report.flagged_categories)
    console.print(f"Flagged Categories: [red]{names or '-'}[/]")

    if report.top_scores:
        table = Table(title="Top Confidence Scores")
        table.add_column("Category", style="cyan")
        table.add_column("Score", justify="right", style="yellow")
        for category, score in report.top_scores:
            table.add_row(category.value, format_score(score))
        console.print(table)
    console.print("")


def render_rate_limit(console: Console, info: RateLimitInfo | None, wait_ms: int) -> None:
    """Print quota state and the recommended wait."""
    if info is None:
        console.print("[dim]No rate-limit headers in the response.[/]")
        return

    table = Table(title="Rate Limits")
    table.add_column("Dimension", style="cyan")
    table.add_column("Remaining", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("Resets in", justify="right")
    table.add_row(
        "requests",
        _show(info.remaining_requests),
        _show(info.limit_requests),
        _show(info.reset_requests),
    )
    table.add_row(
        "tokens",
        _show(info.remaining_tokens),
        _show(info.limit_tokens),
        _show(info.reset_tokens),
    )
    console.print(table)

    if wait_ms > 0:
        console.print(f"[yellow]Quota is low: wait {wait_ms / 1000:g}s before the next call.[/]")
    else:
        console.print("[green]No wait recommended.[/]")


def _show(value: object) -> str:
    return "-" if value is None else str(value)
