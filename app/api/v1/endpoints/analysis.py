from fastapi import APIRouter, HTTPException
from app.schemas.analysis import AnalyzeRequest, AnalysisResponse
from app.services.page_service import page_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Page Analysis"])

# Plain def: the page fetch blocks and runs in the threadpool.
@router.post("/analyze", response_model=AnalysisResponse)
def analyze_page(payload: AnalyzeRequest):
    if not payload.url:
        raise HTTPException(status_code=400, detail="URL is required")

    try:
        return page_service.analyze_url(payload.url)
    except Exception as e:
        logger.error("Analysis error for %s: %s", payload.url, e)
        raise HTTPException(
            status_code=500,
            detail="Failed to analyze URL. Please check the URL and try again."
        )
