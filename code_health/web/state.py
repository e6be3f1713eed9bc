"""In-memory state for the report API — no database required."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from code_health.analysis.health import Snapshot
from code_health.engine import AnalysisReport


@dataclass
class ScanSession:
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    source_dir: str = ""
    report: AnalysisReport | None = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class AppState:
    """Singleton in-memory state shared by all API routes."""

    def __init__(self):
        self.scans: dict[str, ScanSession] = {}
        self.baselines: dict[str, Snapshot] = {}  # source_dir -> first (or pinned) scan

    def add_scan(self, session: ScanSession) -> None:
        self.scans[session.id] = session

    def get_scan(self, scan_id: str) -> ScanSession | None:
        return self.scans.get(scan_id)

    def delete_scan(self, scan_id: str) -> bool:
        return self.scans.pop(scan_id, None) is not None

    # ── Baselines ───────────────────────────────────────────

    def get_baseline(self, source_dir: str) -> Snapshot | None:
        return self.baselines.get(source_dir)

    def set_baseline(self, source_dir: str, snapshot: Snapshot) -> None:
        self.baselines[source_dir] = snapshot

    def reset_baseline(self, source_dir: str) -> bool:
        return self.baselines.pop(source_dir, None) is not None


# Module-level singleton — all routers import this
state = AppState()
