"""Flags ``<img>`` tags without an ``alt`` attribute in JSX files."""

from __future__ import annotations

import re

from code_health.models import Issue, RuleContext, ScannedFile, Severity
from code_health.rules.base import Rule, is_jsx_file, line_of_offset

_IMG_TAG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_ALT_ATTR_RE = re.compile(r"""\balt\s*=\s*["'{]""", re.IGNORECASE)


class ImgAltRule(Rule):
    id = "img-alt"
    title = "img tag missing alt"

    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        issues: list[Issue] = []
        for f in files:
            if not is_jsx_file(f):
                continue
            for m in _IMG_TAG_RE.finditer(f.content):
                if _ALT_ATTR_RE.search(m.group(0)):
                    continue
                line = line_of_offset(f.content, m.start())
                issues.append(Issue(
                    id=f"{self.id}:{f.rel_path}:{line}",
                    severity=Severity.WARN,
                    message="<img> without alt.",
                    file_path=f.path,
                    line=line,
                    rule_id=self.id,
                ))
        return issues
