"""Flags inline functions passed to event props of React components."""

from __future__ import annotations

import re

from code_health.models import Issue, RuleContext, ScannedFile, Severity
from code_health.rules.base import Rule, is_jsx_file, line_of_offset
from code_health.rules.jsx_tags import is_component_tag, opening_tag_name

# onClick={() => ...} | onChange={e => ...} | onBlur={function ...}
_INLINE_HANDLER_RE = re.compile(
    r"\bon[A-Z][A-Za-z0-9]*\s*=\s*{\s*"
    r"(?:\([^)]*\)\s*=>|[A-Za-z_$][\w$]*\s*=>|function\b)"
)


class InlineFunctionPropRule(Rule):
    id = "perf-inline-function-prop"
    title = "Inline function passed as JSX prop"

    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        issues: list[Issue] = []
        for f in files:
            if not is_jsx_file(f):
                continue
            for m in _INLINE_HANDLER_RE.finditer(f.content):
                # Host elements like <button> are not memoized
                if not is_component_tag(opening_tag_name(f.content, m.start())):
                    continue
                line = line_of_offset(f.content, m.start())
                issues.append(Issue(
                    id=f"{self.id}:{f.rel_path}:{line}",
                    severity=Severity.INFO,
                    message=(
                        "Inline function prop may cause avoidable re-renders in "
                        "memoized children. Review if this is on a hot render path."
                    ),
                    file_path=f.path,
                    line=line,
                    rule_id=self.id,
                ))
        return issues
