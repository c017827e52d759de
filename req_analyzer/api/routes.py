"""
API routes — thin HTTP layer over the analysis service and session machine.

Routes:
  GET  /health                         → API health check
  POST /api/analysis                   → Analyze text, return the design record
  POST /api/analysis/export            → Analyze text, return the text document
  POST /api/sessions                   → Open a new analysis session
  GET  /api/sessions/{session_id}      → Current session status and result
  POST /api/sessions/{session_id}/submit → Run one analysis in the session
  POST /api/sessions/{session_id}/reset  → Return the session to idle
  DELETE /api/sessions/{session_id}    → Close the session and drop it
  GET  /api/sessions/{session_id}/export → Download the completed document
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from req_analyzer.models.enums import AnalysisStatus
from req_analyzer.models.schemas import RequirementAnalysis
from req_analyzer.orchestration.session import AnalysisSession
from req_analyzer.orchestration.transitions import SessionBusyError
from req_analyzer.services.analysis_service import AnalysisFailure, AnalysisService
from req_analyzer.services.export_service import export_filename, render_design_document

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
analysis_router = APIRouter()
session_router = APIRouter()

# ── In-memory session registry (process lifetime only) ───
_sessions: dict[str, AnalysisSession] = {}


def get_service() -> AnalysisService:
    return AnalysisService()


# ── Request / response schemas ───────────────────────────
class AnalyzeRequest(BaseModel):
    text: str


class SessionResponse(BaseModel):
    session_id: str
    status: str
    error_message: str | None = None
    result: dict[str, Any] | None = None


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Stateless analysis ───────────────────────────────────

def _document_response(analysis: RequirementAnalysis) -> PlainTextResponse:
    filename = export_filename()
    return PlainTextResponse(
        render_design_document(analysis),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


async def _analyze_or_502(text: str) -> RequirementAnalysis:
    try:
        return await get_service().analyze(text)
    except AnalysisFailure as e:
        raise HTTPException(status_code=502, detail=e.message)


@analysis_router.post("")
async def analyze(body: AnalyzeRequest):
    analysis = await _analyze_or_502(body.text)
    return analysis.model_dump(mode="json", by_alias=True)


@analysis_router.post("/export", response_class=PlainTextResponse)
async def analyze_and_export(body: AnalyzeRequest):
    analysis = await _analyze_or_502(body.text)
    return _document_response(analysis)


# ── Sessions ─────────────────────────────────────────────

def _get_session(session_id: str) -> AnalysisSession:
    session = _sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session


@session_router.post("", response_model=SessionResponse, status_code=201)
async def create_session():
    session = AnalysisSession()
    _sessions[session.session_id] = session
    logger.info(f"Opened session {session.session_id}")
    return SessionResponse(**session.snapshot())


@session_router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str):
    return SessionResponse(**_get_session(session_id).snapshot())


@session_router.post("/{session_id}/submit", response_model=SessionResponse)
async def submit_session(session_id: str, body: AnalyzeRequest):
    session = _get_session(session_id)
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Requirement text must not be blank")

    try:
        await session.submit(body.text, get_service())
    except SessionBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return SessionResponse(**session.snapshot())


@session_router.post("/{session_id}/reset", response_model=SessionResponse)
async def reset_session(session_id: str):
    session = _get_session(session_id)
    session.reset()
    return SessionResponse(**session.snapshot())


@session_router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str):
    session = _get_session(session_id)
    if session.status == AnalysisStatus.ANALYZING:
        raise HTTPException(
            status_code=409,
            detail=f"Session {session_id} is analyzing; reset it before closing",
        )
    _sessions.pop(session_id, None)
    logger.info(f"Closed session {session_id}")
    return Response(status_code=204)


@session_router.get("/{session_id}/export", response_class=PlainTextResponse)
async def export_session(session_id: str):
    session = _get_session(session_id)
    if session.status != AnalysisStatus.COMPLETED or session.result is None:
        raise HTTPException(
            status_code=409,
            detail=f"Session {session_id} has no completed analysis (status: {session.status.value})",
        )
    return _document_response(session.result)
