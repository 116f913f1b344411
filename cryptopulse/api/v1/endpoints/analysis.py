"""
Analysis API Endpoints

Relays a price series to the analysis engine.
"""

import logging

from fastapi import APIRouter, HTTPException

from cryptopulse.schemas.analysis import AnalyzeRequest, AnalysisResult
from cryptopulse.services.analysis import get_analysis_service
from cryptopulse.services.base import InsufficientDataError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=AnalysisResult)
async def analyze_prices(request: AnalyzeRequest):
    """
    Analyze a price series.

    Returns:
        - RSI (14)
        - MACD (12/26/9) line, signal and histogram
        - SMA 20 / 50 / 200
        - Trend direction, strength and description
    """
    analysis_service = get_analysis_service()
    try:
        return await analysis_service.execute(request.prices)
    except InsufficientDataError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        logger.exception(f"Error analyzing {len(request.prices)} prices")
        raise HTTPException(status_code=500, detail="Failed to analyze price data")
