"""Flags Context Providers whose ``value`` is an inline object."""

from __future__ import annotations

import re

from code_health.models import Issue, RuleContext, ScannedFile, Severity
from code_health.rules.base import Rule, is_jsx_file, line_of_offset

_PROVIDER_VALUE_OBJECT_RE = re.compile(r"<[\w$]+\.Provider\b[^>]*\bvalue\s*=\s*{\s*{\s*")


class ContextProviderValueRule(Rule):
    id = "perf-context-provider-value"
    title = "Context Provider value is an inline object"

    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        issues: list[Issue] = []
        for f in files:
            if not is_jsx_file(f):
                continue
            for m in _PROVIDER_VALUE_OBJECT_RE.finditer(f.content):
                line = line_of_offset(f.content, m.start())
                issues.append(Issue(
                    id=f"{self.id}:{f.rel_path}:{line}",
                    severity=Severity.WARN,
                    message=(
                        "Context Provider value is created inline. Wrap it in useMemo "
                        "so consumers do not re-render on every provider render."
                    ),
                    file_path=f.path,
                    line=line,
                    rule_id=self.id,
                ))
        return issues
