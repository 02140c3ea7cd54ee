from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from grawlix.services.filter_service import get_filter_service, FilterService
from grawlix.schemas.text import TextFilterRequest, ReplaceTextRequest
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["text"])


@router.post("/check-text", response_model=bool)
async def check_text(
    request: TextFilterRequest,
    filter_service: FilterService = Depends(get_filter_service)
):
    """Return true when the content has profanity."""
    try:
        return filter_service.check(request)
    except Exception as e:
        logger.error(f"Error in check_text endpoint: {e}")
        raise


@router.post("/censor-text", response_class=PlainTextResponse)
async def censor_text(
    request: TextFilterRequest,
    filter_service: FilterService = Depends(get_filter_service)
):
    """Return the content with profanity masked; clean content comes back as-is."""
    try:
        return filter_service.censor(request)
    except Exception as e:
        logger.error(f"Error in censor_text endpoint: {e}")
        raise


@router.post("/replace-text", response_class=PlainTextResponse)
async def replace_text(
    request: ReplaceTextRequest,
    filter_service: FilterService = Depends(get_filter_service)
):
    """Return the content with each profane term replaced by the grawlix."""
    try:
        return filter_service.replace(request)
    except Exception as e:
        logger.error(f"Error in replace_text endpoint: {e}")
        raise
