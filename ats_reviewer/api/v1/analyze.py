import logging

from fastapi import APIRouter, Header, HTTPException, Request, status

from ats_reviewer.core.rate_limit import rate_limit
from ats_reviewer.core.security import check_api_key
from ats_reviewer.schemas.analysis import AnalysisRequest, AnalysisResult, Weights
from ats_reviewer.services.analysis_service import analyze

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=AnalysisResult)
@rate_limit()
def analyze_resume(
    request: Request,
    payload: AnalysisRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    if not payload.resume_text.strip() or not payload.jd_text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide both resume and job description text.",
        )
    try:
        return analyze(payload)
    except Exception as exc:
        logger.exception("Analysis failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error while analyzing the resume.",
        ) from exc


@router.get("/config/weights", response_model=Weights)
async def default_weights():
    return Weights()
