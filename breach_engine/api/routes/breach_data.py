"""
Breach data API routes - Serve the aggregated breach disclosure envelope
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/breach-data")
async def get_breach_data(request: Request):
    """
    Aggregated breach records from all sources

    Served from the result cache while it is fresh; otherwise every source is
    scraped again. Sources that failed are reported through meta.status.
    """
    result_cache = request.app.state.result_cache
    source_manager = request.app.state.source_manager

    try:
        envelope = await result_cache.get_or_build(source_manager.aggregate)
    except Exception as e:
        logger.error(f"Error handling request: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return envelope.to_dict()
