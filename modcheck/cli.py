"""modcheck CLI — the main entry point."""

import json
import time

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modcheck import __version__
from modcheck.errors import ModcheckError

console = Console()


def _fail(error: Exception) -> None:
    console.print(f"[red]Failed:[/] {escape(str(error))}")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
def main():
    """modcheck — content moderation checks.

    Send text to the OpenAI moderation endpoint, report flagged categories
    and top confidence scores, and advise on rate-limit headroom.
    """


# ── Run ──────────────────────────────────────────────────────────────


@main.command()
@click.argument("content_path", required=False)
@click.option("--model", "-m", default=None, help="Moderation model (default: omni-moderation-latest)")
@click.option("--config", "-c", "config_path", default=None,
              type=click.Path(exists=True, dir_okay=False), help="YAML settings file")
@click.option("--threshold", type=click.FloatRange(min=0.0), default=None,
              help="Quota ratio below which a wait is advised (default: 0.1)")
@click.option("--wait/--no-wait", default=False, help="Sleep for the advised wait before exiting")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
def run(
    content_path: str | None,
    model: str | None,
    config_path: str | None,
    threshold: float | None,
    wait: bool,
    log_level: str | None,
):
    """Moderate the text in CONTENT_PATH (default: content.txt)."""
    from modcheck.app import ModerationApp
    from modcheck.config import load_settings
    from modcheck.utils.log import setup_logging

    try:
        settings = load_settings(
            config_path, model=model, wait_threshold=threshold, log_level=log_level
        )
        setup_logging(settings.log_level)

        console.print("\n[bold blue]modcheck[/] — Starting moderation\n")
        app = ModerationApp(settings, console=console)
        outcome = app.run(content_path)
    except ModcheckError as e:
        _fail(e)
        return

    if wait and outcome.wait_ms > 0:
        console.print(f"Waiting {outcome.wait_ms / 1000:g}s...")
        time.sleep(outcome.wait_ms / 1000)

    console.print("[green]Moderation completed![/]")


# ── Advise ───────────────────────────────────────────────────────────


@main.command()
@click.option("--limit-requests", type=int, default=None)
@click.option("--remaining-requests", type=int, default=None)
@click.option("--reset-requests", default=None, help="e.g. 30s, 2m, 1h")
@click.option("--limit-tokens", type=int, default=None)
@click.option("--remaining-tokens", type=int, default=None)
@click.option("--reset-tokens", default=None, help="e.g. 30s, 2m, 1h")
@click.option("--threshold", type=click.FloatRange(min=0.0), default=0.1, show_default=True)
def advise(
    limit_requests: int | None,
    remaining_requests: int | None,
    reset_requests: str | None,
    limit_tokens: int | None,
    remaining_tokens: int | None,
    reset_tokens: str | None,
    threshold: float,
):
    """Compute the recommended wait from rate-limit header values."""
    from modcheck.ratelimit import RateLimitInfo, advise_wait
    from modcheck.report import render_rate_limit

    info = RateLimitInfo(
        limit_requests=limit_requests,
        remaining_requests=remaining_requests,
        reset_requests=reset_requests,
        limit_tokens=limit_tokens,
        remaining_tokens=remaining_tokens,
        reset_tokens=reset_tokens,
    )
    wait_ms = advise_wait(info, threshold=threshold)
    render_rate_limit(console, info, wait_ms)
    console.print(f"Recommended wait: {wait_ms}ms")


# ── Duration ─────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.option("--strict", is_flag=True, help="Exit with an error if TEXT cannot be parsed")
def duration(text: str, strict: bool):
    """Convert a reset duration such as 30s, 2m or 1h to milliseconds."""
    from modcheck.ratelimit import parse_duration, parse_duration_strict

    if strict:
        value = parse_duration_strict(text)
        if value is None:
            console.print(f"[red]Cannot parse duration:[/] {escape(text)}")
            raise SystemExit(1)
    else:
        value = parse_duration(text)
    console.print(str(value))


# ── Categories ───────────────────────────────────────────────────────


@main.command()
def categories():
    """List the moderation categories in reporting order."""
    from modcheck.moderation import ModerationCategory

    table = Table(title=f"Moderation Categories ({len(ModerationCategory)})")
    table.add_column("#", style="dim", width=3)
    table.add_column("Category", style="cyan")
    for i, category in enumerate(ModerationCategory):
        table.add_row(str(i + 1), category.value)
    console.print(table)


# ── Analyze ──────────────────────────────────────────────────────────


@main.command()
@click.argument("json_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--threshold", type=click.FloatRange(min=0.0), default=0.1, show_default=True,
              help="Minimum score for the top-scores list")
@click.option("--top", "top_n", type=click.IntRange(min=0), default=3, show_default=True)
def analyze(json_path: str, threshold: float, top_n: int):
    """Analyze a saved moderation result or response (JSON) offline."""
    from modcheck.moderation import ModerationResponse, ModerationResult
    from modcheck.moderation import analyze as analyze_result
    from modcheck.report import render_analysis

    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        _fail(e)
        return

    try:
        if isinstance(data, dict) and "results" in data:
            results = ModerationResponse.from_dict(data).results
        else:
            results = [ModerationResult.from_dict(data)]
    except ModcheckError as e:
        _fail(e)
        return

    if not results:
        console.print("[yellow]No results in file.[/]")
        return

    report = analyze_result(results[0], threshold=threshold, limit=top_n)
    render_analysis(console, report, source=json_path)


if __name__ == "__main__":
    main()
