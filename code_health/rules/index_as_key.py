"""Flags array indexes used as React ``key`` values."""

from __future__ import annotations

import re

from code_health.models import Issue, RuleContext, ScannedFile, Severity
from code_health.rules.base import Rule, is_jsx_file, line_of_offset

_INDEX_KEY_RE = re.compile(r"\bkey\s*=\s*{\s*(?:index|i|idx)\s*}")


class IndexAsKeyRule(Rule):
    id = "perf-index-as-key"
    title = "Array index used as key"

    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        issues: list[Issue] = []
        for f in files:
            if not is_jsx_file(f):
                continue
            for m in _INDEX_KEY_RE.finditer(f.content):
                line = line_of_offset(f.content, m.start())
                issues.append(Issue(
                    id=f"{self.id}:{f.rel_path}:{line}",
                    severity=Severity.WARN,
                    message=(
                        "Using array index as key can cause unstable renders "
                        "and state bugs. Prefer a stable id."
                    ),
                    file_path=f.path,
                    line=line,
                    rule_id=self.id,
                ))
        return issues
