"""Flags object and array literals passed inline as JSX props."""

from __future__ import annotations

import re

from code_health.models import Issue, RuleContext, ScannedFile, Severity
from code_health.rules.base import Rule, is_jsx_file, line_of_offset

_LITERAL_PROP_PATTERNS = (
    (re.compile(r"=\s*{\s*{\s*[^}]*}\s*}"), "Object literal prop"),    # ={{ ... }}
    (re.compile(r"=\s*{\s*\[\s*[^\]]*\]\s*}"), "Array literal prop"),  # ={[ ... ]}
)


class JsxLiteralPropRule(Rule):
    id = "perf-jsx-literal-prop"
    title = "Object/array literal passed as JSX prop"

    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        issues: list[Issue] = []
        for f in files:
            if not is_jsx_file(f):
                continue
            for pattern, label in _LITERAL_PROP_PATTERNS:
                for m in pattern.finditer(f.content):
                    line = line_of_offset(f.content, m.start())
                    issues.append(Issue(
                        id=f"{self.id}:{label}:{f.rel_path}:{line}",
                        severity=Severity.INFO,
                        message=(
                            f"{label} created inline can cause re-renders due to new "
                            "reference each render. Consider useMemo or moving constant outside."
                        ),
                        file_path=f.path,
                        line=line,
                        rule_id=self.id,
                    ))
        return issues
