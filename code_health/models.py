"""Data models shared by the scanner, the rules and the report layers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path

_LINE_BREAK_RE = re.compile(r"\r?\n")


class Severity(enum.Enum):
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.ERROR: 2,
    Severity.WARN: 1,
    Severity.INFO: 0,
}


def normalize_path(p: str) -> str:
    """Slash-normalize a path so it can be used as a graph identity."""
    return p.replace("\\", "/")


@dataclass(frozen=True)
class ScannedFile:
    """One source file of the analysed snapshot. Never mutated by rules."""
    path: str
    rel_path: str
    content: str
    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, path: str, rel_path: str, content: str) -> ScannedFile:
        return cls(
            path=path,
            rel_path=rel_path,
            content=content,
            lines=tuple(_LINE_BREAK_RE.split(content)),
        )

    @property
    def key(self) -> str:
        return normalize_path(self.rel_path)


@dataclass
class Issue:
    """A single finding reported by a rule."""
    id: str
    severity: Severity
    message: str
    file_path: str
    rule_id: str
    line: int | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "severity": self.severity.value,
            "message": self.message,
            "file_path": self.file_path,
            "line": self.line,
            "rule_id": self.rule_id,
        }


@dataclass
class RuleContext:
    """Shared settings handed to every rule."""
    root_path: str = "."
    max_file_lines: int = 1000


@dataclass
class ScanConfig:
    """Configuration for a workspace scan."""
    source_dir: Path = field(default_factory=lambda: Path("."))
    include_dirs: list[str] = field(default_factory=lambda: ["src", "app", "components"])
    extensions: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")
    skip_dirs: list[str] = field(default_factory=lambda: [
        "node_modules", "dist", "build", ".next", ".git",
    ])
    max_file_lines: int = 1000

    def rule_context(self) -> RuleContext:
        return RuleContext(
            root_path=str(self.source_dir),
            max_file_lines=self.max_file_lines,
        )
