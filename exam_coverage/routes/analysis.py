"""
Analysis routes
"""

from fastapi import APIRouter, Depends, HTTPException

from ..core.exceptions import AnalysisInProgressError
from ..models import AnalysisOutcome, SessionState
from ..services.session import AnalysisSession
from .deps import get_session

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("", response_model=AnalysisOutcome)
async def run_analysis(session: AnalysisSession = Depends(get_session)):
    """Compare the queued exam pages against the syllabus"""
    try:
        outcome = await session.run_analysis()
    except AnalysisInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if outcome is None:
        raise HTTPException(status_code=400, detail="Upload at least one file before running the analysis")
    return outcome


@router.get("", response_model=SessionState)
async def get_analysis_state(session: AnalysisSession = Depends(get_session)):
    """Current files, gate, last report and last failure"""
    return session.snapshot()
