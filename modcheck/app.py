"""Single-shot moderation run: read, moderate, analyze, report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from modcheck.api.client import ModerationClient
from modcheck.config import Settings
from modcheck.moderation.analyzer import analyze
from modcheck.moderation.models import AnalysisReport, ModerationResponse
from modcheck.ratelimit.advisor import advise_wait
from modcheck.report import render_analysis, render_rate_limit
from modcheck.utils.content import read_content

logger = logging.getLogger(__name__)


@dataclass
class RunOutcome:
    """What a run produced."""

    response: ModerationResponse
    report: Optional[AnalysisReport] = None
    wait_ms: int = 0


class ModerationApp:
    """Moderate one piece of content and print the analysis."""

    def __init__(
        self,
        settings: Settings,
        client: ModerationClient | None = None,
        console: Console | None = None,
    ) -> None:
        self.settings = settings
        self.client = client or ModerationClient.from_settings(settings)
        self.console = console or Console()

    def run(self, content_path: str | None = None) -> RunOutcome:
        path = content_path or self.settings.content_path
        text = read_content(path)
        self.console.print(f"Content loaded from [cyan]{path}[/]")

        response = self.client.moderate(text)

        report = None
        if response.results:
            report = analyze(
                response.results[0],
                threshold=self.settings.score_threshold,
                limit=self.settings.top_n,
            )
            render_analysis(self.console, report, text)
        else:
            logger.warning("Moderation response %s carried no results", response.id)

        wait_ms = 0
        if response.rate_limit is not None:
            wait_ms = advise_wait(response.rate_limit, threshold=self.settings.wait_threshold)
            logger.debug("Advised wait: %dms", wait_ms)
        render_rate_limit(self.console, response.rate_limit, wait_ms)

        return RunOutcome(response=response, report=report, wait_ms=wait_ms)
