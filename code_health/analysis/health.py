"""Health score — turns a list of issues into a 0-100 score and a label."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass

from code_health.models import Issue, Severity


@dataclass
class HealthScore:
    score: int
    label: str

    def to_dict(self) -> dict:
        return {"score": self.score, "label": self.label}


@dataclass
class Snapshot:
    """Score of one scan, kept as a baseline for later scans."""
    score: int
    label: str
    issue_count: int

    def to_dict(self) -> dict:
        return {"score": self.score, "label": self.label, "issue_count": self.issue_count}

    @classmethod
    def from_dict(cls, data: dict) -> Snapshot:
        return cls(
            score=int(data["score"]),
            label=str(data["label"]),
            issue_count=int(data["issue_count"]),
        )


@dataclass
class Improvement:
    delta_score: int
    pct: int
    delta_issues: int

    def to_dict(self) -> dict:
        return {
            "delta_score": self.delta_score,
            "pct": self.pct,
            "delta_issues": self.delta_issues,
        }


def calculate_health_score(issues: list[Issue]) -> HealthScore:
    """Score a codebase from its issues.

    Errors and warnings are penalized linearly up to a cap. Info issues are
    penalized logarithmically per rule so one noisy rule cannot sink the score.
    """
    errors = sum(1 for i in issues if i.severity is Severity.ERROR)
    warns = sum(1 for i in issues if i.severity is Severity.WARN)
    info_by_rule = Counter(i.rule_id for i in issues if i.severity is Severity.INFO)

    error_penalty = min(60, errors * 20)
    warn_penalty = min(25, warns * 5)
    info_penalty = min(15, sum(_log_penalty(n, 2) for n in info_by_rule.values()))

    score = 100 - (error_penalty + warn_penalty + info_penalty)
    score = max(0, _round_half_up(score))
    return HealthScore(score=score, label=_label_for(score))


def make_snapshot(issues: list[Issue]) -> Snapshot:
    health = calculate_health_score(issues)
    return Snapshot(score=health.score, label=health.label, issue_count=len(issues))


def compute_improvement(before: Snapshot, after: Snapshot) -> Improvement:
    """Compare two snapshots, e.g. before and after a fix."""
    delta_score = after.score - before.score
    base = max(1, before.score)
    return Improvement(
        delta_score=delta_score,
        pct=_round_half_up(delta_score / base * 100),
        delta_issues=after.issue_count - before.issue_count,
    )


def _log_penalty(count: int, weight: float) -> float:
    if count == 0:
        return 0.0
    return weight * math.log2(count + 1)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _label_for(score: int) -> str:
    if score < 40:
        return "Critical"
    if score < 65:
        return "Risky"
    if score < 85:
        return "Good"
    return "Excellent"
