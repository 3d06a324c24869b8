from fastapi import APIRouter
from .analysis import router as analysis_router
from .compress import router as compress_router

router = APIRouter()
router.include_router(analysis_router)
router.include_router(compress_router)
