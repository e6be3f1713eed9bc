"""FastAPI routes for the report API."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from code_health.engine import analyze
from code_health.models import ScanConfig
from code_health.rules import default_rules, select_rules
from code_health.web.state import ScanSession, state

router = APIRouter(prefix="/api")


# --- Request / Response models ---

class ScanRequest(BaseModel):
    path: str
    max_file_lines: int = 1000
    include_dirs: list[str] | None = None
    rules: list[str] | None = None
    update_baseline: bool = False


def _validate_path(p: str) -> Path:
    resolved = Path(p).expanduser().resolve()
    if not resolved.is_dir():
        raise HTTPException(404, f"Directory not found: {resolved}")
    return resolved


def _session_payload(session: ScanSession) -> dict:
    payload = {
        "scan_id": session.id,
        "source_dir": session.source_dir,
        "timestamp": session.timestamp,
    }
    if session.report is not None:
        payload.update(session.report.to_dict())
    return payload


# --- Endpoints ---

@router.post("/scan")
async def start_scan(req: ScanRequest):
    source_dir = _validate_path(req.path)
    config = ScanConfig(source_dir=source_dir, max_file_lines=req.max_file_lines)
    if req.include_dirs:
        config.include_dirs = list(req.include_dirs)

    try:
        rules = select_rules(req.rules)
    except ValueError as e:
        raise HTTPException(400, str(e))

    report = await asyncio.to_thread(analyze, config, rules)

    # The first scan of a directory becomes its baseline
    baseline = state.get_baseline(str(source_dir))
    if baseline is None or req.update_baseline:
        baseline = report.snapshot()
        state.set_baseline(str(source_dir), baseline)
    report.compare_to(baseline)

    session = ScanSession(source_dir=str(source_dir), report=report)
    state.add_scan(session)
    return _session_payload(session)


@router.get("/scan/{scan_id}")
async def get_scan(scan_id: str):
    session = state.get_scan(scan_id)
    if not session:
        raise HTTPException(404, "Scan not found")
    return _session_payload(session)


@router.delete("/scan/{scan_id}")
async def delete_scan(scan_id: str):
    if not state.delete_scan(scan_id):
        raise HTTPException(404, "Scan not found")
    return {"deleted": scan_id}


@router.delete("/baseline")
async def reset_baseline(path: str = Query(...)):
    source_dir = _validate_path(path)
    if not state.reset_baseline(str(source_dir)):
        raise HTTPException(404, "No baseline for this path")
    return {"reset": str(source_dir)}


@router.get("/rules")
async def list_rules():
    return [{"id": r.id, "title": r.title} for r in default_rules()]
