"""Tests for the health score."""

from code_health.analysis.health import (
    Snapshot,
    calculate_health_score,
    compute_improvement,
    make_snapshot,
)
from code_health.models import Issue, Severity


def _issue(severity, rule_id="some-rule", n=0):
    return Issue(
        id=f"{rule_id}:{n}",
        severity=severity,
        message="m",
        file_path="/workspace/src/a.ts",
        rule_id=rule_id,
    )


class TestHealthScore:
    def test_no_issues(self):
        result = calculate_health_score([])
        assert result.score == 100
        assert result.label == "Excellent"

    def test_one_error(self):
        result = calculate_health_score([_issue(Severity.ERROR)])
        assert result.score == 80
        assert result.label == "Good"

    def test_error_penalty_capped(self):
        issues = [_issue(Severity.ERROR, n=i) for i in range(10)]
        result = calculate_health_score(issues)
        assert result.score == 40
        assert result.label == "Risky"

    def test_critical(self):
        issues = [_issue(Severity.ERROR, n=i) for i in range(3)]
        issues += [_issue(Severity.WARN, n=i) for i in range(5)]
        result = calculate_health_score(issues)
        assert result.score == 15
        assert result.label == "Critical"

    def test_info_is_logarithmic_per_rule(self):
        issues = [_issue(Severity.INFO, n=i) for i in range(3)]
        assert calculate_health_score(issues).score == 96

    def test_info_penalty_capped(self):
        issues = [
            _issue(Severity.INFO, rule_id=f"rule-{r}", n=i)
            for r in range(10) for i in range(50)
        ]
        assert calculate_health_score(issues).score == 85

    def test_never_negative(self):
        issues = [_issue(Severity.ERROR, n=i) for i in range(20)]
        issues += [_issue(Severity.WARN, n=i) for i in range(20)]
        issues += [_issue(Severity.INFO, n=i) for i in range(200)]
        assert calculate_health_score(issues).score == 0


class TestSnapshot:
    def test_snapshot(self):
        snap = make_snapshot([_issue(Severity.ERROR), _issue(Severity.WARN)])
        assert snap == Snapshot(score=75, label="Good", issue_count=2)

    def test_snapshot_empty(self):
        assert make_snapshot([]) == Snapshot(score=100, label="Excellent", issue_count=0)

    def test_dict_round_trip(self):
        snap = Snapshot(score=75, label="Good", issue_count=2)
        assert Snapshot.from_dict(snap.to_dict()) == snap

    def test_improvement(self):
        before = Snapshot(score=75, label="Good", issue_count=2)
        after = Snapshot(score=95, label="Excellent", issue_count=1)
        result = compute_improvement(before, after)
        assert result.delta_score == 20
        assert result.pct == 27
        assert result.delta_issues == -1

    def test_regression(self):
        before = Snapshot(score=80, label="Good", issue_count=1)
        after = Snapshot(score=60, label="Risky", issue_count=2)
        assert compute_improvement(before, after).to_dict() == {
            "delta_score": -20, "pct": -25, "delta_issues": 1,
        }

    def test_improvement_from_zero(self):
        before = Snapshot(score=0, label="Critical", issue_count=20)
        after = Snapshot(score=10, label="Critical", issue_count=9)
        assert compute_improvement(before, after).pct == 1000
