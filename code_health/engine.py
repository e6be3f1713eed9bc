"""Runs rules over a file snapshot and assembles the report."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from code_health.analysis.health import (
    HealthScore,
    Improvement,
    Snapshot,
    calculate_health_score,
    compute_improvement,
    make_snapshot,
)
from code_health.models import Issue, RuleContext, ScanConfig, ScannedFile, Severity
from code_health.rules import Rule, default_rules
from code_health.scanner import scan_workspace

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    files_scanned: int
    issues: list[Issue] = field(default_factory=list)
    health: HealthScore | None = None
    improvement: Improvement | None = None

    @property
    def has_errors(self) -> bool:
        return any(i.severity is Severity.ERROR for i in self.issues)

    def snapshot(self) -> Snapshot:
        return make_snapshot(self.issues)

    def compare_to(self, baseline: Snapshot) -> Improvement:
        """Record and return the change since ``baseline``."""
        self.improvement = compute_improvement(baseline, self.snapshot())
        return self.improvement

    def to_dict(self) -> dict:
        return {
            "files_scanned": self.files_scanned,
            "issues": [i.to_dict() for i in self.issues],
            "health": self.health.to_dict() if self.health else None,
            "improvement": self.improvement.to_dict() if self.improvement else None,
        }


async def run_rules(
    rules: list[Rule],
    ctx: RuleContext,
    files: list[ScannedFile],
) -> list[Issue]:
    """Run rules back-to-back, drop duplicate ids and sort for display.

    Sorted by severity (ERROR first), then by file path.
    """
    issues: list[Issue] = []
    seen: set[str] = set()
    for rule in rules:
        found = await rule.run(ctx, files)
        logger.debug("rule %s: %d issue(s)", rule.id, len(found))
        for issue in found:
            if issue.id in seen:
                continue
            seen.add(issue.id)
            issues.append(issue)

    issues.sort(key=lambda i: (-i.severity.rank, i.file_path))
    return issues


def analyze_files(
    files: list[ScannedFile],
    ctx: RuleContext | None = None,
    rules: list[Rule] | None = None,
) -> AnalysisReport:
    """Analyze an already loaded snapshot."""
    ctx = ctx or RuleContext()
    rules = default_rules() if rules is None else rules
    issues = asyncio.run(run_rules(rules, ctx, files))
    return AnalysisReport(
        files_scanned=len(files),
        issues=issues,
        health=calculate_health_score(issues),
    )


def analyze(config: ScanConfig, rules: list[Rule] | None = None) -> AnalysisReport:
    """Scan ``config.source_dir`` and run the rules over it."""
    files = scan_workspace(config)
    return analyze_files(files, config.rule_context(), rules)
