"""Flags files that grew past the configured line limit."""

from __future__ import annotations

from code_health.models import Issue, RuleContext, ScannedFile, Severity
from code_health.rules.base import Rule


class BigFileRule(Rule):
    id = "big-file"
    title = "File too large"

    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        issues: list[Issue] = []
        for f in files:
            count = len(f.lines)
            if count <= ctx.max_file_lines:
                continue
            issues.append(Issue(
                id=f"{self.id}:{f.rel_path}",
                severity=Severity.WARN,
                message=(
                    f"File has {count} lines (limit {ctx.max_file_lines}). "
                    "Consider splitting components/hooks."
                ),
                file_path=f.path,
                line=1,
                rule_id=self.id,
            ))
        return issues
