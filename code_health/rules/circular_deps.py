"""Circular import detection between JS/TS modules."""

from __future__ import annotations

import logging

from code_health.analysis.import_graph import (
    build_import_graph,
    find_cycles,
    find_import_line,
)
from code_health.models import Issue, RuleContext, ScannedFile, Severity
from code_health.rules.base import Rule

logger = logging.getLogger(__name__)


class CircularDepsRule(Rule):
    id = "circular-deps"
    title = "Circular dependency"

    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        return self.check(files)

    def check(self, files: list[ScannedFile]) -> list[Issue]:
        """Synchronous entry point, one issue per detected cycle."""
        by_key = {f.key: f for f in files}
        graph = build_import_graph(files)
        cycles = find_cycles(graph)
        logger.debug("%d import cycle(s) found in %d files", len(cycles), len(files))

        issues: list[Issue] = []
        seen: set[str] = set()
        for cycle in cycles:
            issue = self._issue_for_cycle(cycle, by_key)
            if issue.id in seen:
                continue
            seen.add(issue.id)
            issues.append(issue)
        return issues

    def _issue_for_cycle(self, cycle: list[str], by_key: dict[str, ScannedFile]) -> Issue:
        start, following = cycle[0], cycle[1]
        start_file = by_key.get(start)

        line = None
        if start_file is not None:
            line = find_import_line(start, following, start_file.lines)

        return Issue(
            id=f"cycle:{'->'.join(cycle)}",
            severity=Severity.ERROR,
            message=f"Circular dependency: {' → '.join(cycle)}",
            file_path=start_file.path if start_file is not None else start,
            line=line,
            rule_id=self.id,
        )
