from fastapi import APIRouter, HTTPException
from app.core.config import settings
from app.schemas.compress import CompressRequest, CompressResponse
from app.services.summarization_service import summarization_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Compression"])

# Plain def: summarizing large texts is CPU-bound and runs in the threadpool.
@router.post("/compress", response_model=CompressResponse)
def compress_text(payload: CompressRequest):
    if not payload.text:
        raise HTTPException(status_code=400, detail="Text is required")

    if len(payload.text) > settings.MAX_TEXT_LENGTH:
        raise HTTPException(status_code=400, detail="Text too long")

    try:
        result = summarization_service.compress(payload.text, payload.level)
    except Exception:
        logger.exception("Compression error")
        raise HTTPException(status_code=500, detail="Compression failed")

    return CompressResponse(
        original_length=result.original_length,
        compressed_length=result.compressed_length,
        ratio=result.ratio,
        text=result.text,
    )
