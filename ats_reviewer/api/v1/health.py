from fastapi import APIRouter

from ats_reviewer.core.config.scoring import get_scoring_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the analyzer is up and its scoring config loads.")
async def health_check():
    get_scoring_config()
    return {"status": "healthy"}
